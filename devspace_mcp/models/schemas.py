"""Input models for the DevSpace tools.

One strict pydantic model per tool. Field aliases carry the camelCase names
used on the wire; unknown fields are ignored, missing optional fields keep
their defaults and missing required fields fail validation.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DevSpaceInput(BaseModel):
    """Fields shared by every DevSpace tool."""
    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    working_directory: Optional[str] = Field(
        default=None,
        alias="workingDirectory",
        description="Working directory to execute command in",
    )


class DevSpaceInitInput(DevSpaceInput):
    project_name: Optional[str] = Field(
        default=None, alias="projectName", description="Name of the project to initialize"
    )
    dockerfile: Optional[str] = Field(default=None, description="Path to existing Dockerfile")
    working_directory: Optional[str] = Field(
        default=None,
        alias="workingDirectory",
        description="Directory to initialize DevSpace in (defaults to current directory)",
    )


class DevSpaceDevInput(DevSpaceInput):
    profile: Optional[str] = Field(default=None, description="DevSpace profile to use")
    namespace: Optional[str] = Field(default=None, description="Kubernetes namespace to use")
    terminal: bool = Field(default=False, description="Open terminal instead of showing logs")
    sync: Optional[bool] = Field(default=None, description="Enable file synchronization")
    portforwarding: Optional[bool] = Field(default=None, description="Enable port forwarding")


class DevSpaceDeployInput(DevSpaceInput):
    profile: Optional[str] = Field(default=None, description="DevSpace profile to use")
    namespace: Optional[str] = Field(default=None, description="Kubernetes namespace to use")
    force_build: bool = Field(default=False, alias="forceBuild", description="Force rebuilding of images")
    force_deploy: bool = Field(default=False, alias="forceDeploy", description="Force redeployment")


class DevSpaceBuildInput(DevSpaceInput):
    images: Optional[List[str]] = Field(default=None, description="Specific images to build")
    force_build: bool = Field(default=False, alias="forceBuild", description="Force rebuilding of images")
    skip_push: bool = Field(default=False, alias="skipPush", description="Skip pushing images to registry")


class DevSpaceLogsInput(DevSpaceInput):
    container: Optional[str] = Field(default=None, description="Specific container to get logs from")
    follow: bool = Field(default=False, description="Follow log output continuously")
    lines: Optional[int] = Field(default=None, ge=0, description="Number of lines to show")


class DevSpaceListInput(DevSpaceInput):
    resource: Literal[
        "deployments", "ports", "profiles", "vars", "contexts", "namespaces", "commands"
    ] = Field(description="Type of resource to list")


class DevSpaceEnterInput(DevSpaceInput):
    container: Optional[str] = Field(default=None, description="Container name or selector")


class DevSpacePrintInput(DevSpaceInput):
    profile: Optional[str] = Field(default=None, description="DevSpace profile to use")


class DevSpaceRunInput(DevSpaceInput):
    command: str = Field(description="Command name to run (from devspace.yaml)")
    args: Optional[List[str]] = Field(
        default=None, description="Additional arguments to pass to the command"
    )


class DevSpaceUseInput(DevSpaceInput):
    type: Literal["context", "namespace", "profile"] = Field(description="Type of resource to use")
    name: Optional[str] = Field(
        default=None,
        description="Name of the resource to use (optional - will prompt if not provided)",
    )


class DevSpaceResetInput(DevSpaceInput):
    type: Literal["vars", "dependencies", "pods"] = Field(description="Type of resource to reset")


class DevSpaceSetInput(DevSpaceInput):
    type: Literal["var"] = Field(description="Type of resource to set")
    key: str = Field(description="Variable key to set")
    value: str = Field(description="Variable value to set")


class DevSpaceUIInput(DevSpaceInput):
    port: Optional[int] = Field(default=None, ge=1, le=65535, description="Port to run the UI on")


class DevSpaceAddInput(DevSpaceInput):
    type: Literal["plugin"] = Field(description="Type of resource to add")
    source: str = Field(description="Source URL or name of the resource to add")


class DevSpaceRemoveInput(DevSpaceInput):
    type: Literal["plugin", "context"] = Field(description="Type of resource to remove")
    name: str = Field(description="Name of the resource to remove")
