"""
DevSpace operation registrations.

Each translator returns directives in the order the devspace CLI expects
them. Positional resource/type tokens always come first.
"""

import logging
from typing import List

from ...core.arguments import (
    ArrayOption,
    BooleanOption,
    Directive,
    Flag,
    Option,
    Positional,
)
from ...models.schemas import (
    DevSpaceAddInput,
    DevSpaceBuildInput,
    DevSpaceDeployInput,
    DevSpaceDevInput,
    DevSpaceEnterInput,
    DevSpaceInitInput,
    DevSpaceInput,
    DevSpaceListInput,
    DevSpaceLogsInput,
    DevSpacePrintInput,
    DevSpaceRemoveInput,
    DevSpaceResetInput,
    DevSpaceRunInput,
    DevSpaceSetInput,
    DevSpaceUIInput,
    DevSpaceUseInput,
)
from ..operation_registry import OperationRegistry, OperationSpec

logger = logging.getLogger(__name__)


# ============================================================================
# Translators
# ============================================================================

def no_arguments(_: DevSpaceInput) -> List[Directive]:
    return []


def init_args(parsed: DevSpaceInitInput) -> List[Directive]:
    return [
        Option("--name", parsed.project_name),
        Option("--dockerfile", parsed.dockerfile),
    ]


def dev_args(parsed: DevSpaceDevInput) -> List[Directive]:
    return [
        Option("--profile", parsed.profile),
        Option("--namespace", parsed.namespace),
        Flag("--terminal", parsed.terminal),
        BooleanOption("--sync", parsed.sync),
        BooleanOption("--portforwarding", parsed.portforwarding),
    ]


def deploy_args(parsed: DevSpaceDeployInput) -> List[Directive]:
    return [
        Option("--profile", parsed.profile),
        Option("--namespace", parsed.namespace),
        Flag("--force-build", parsed.force_build),
        Flag("--force-deploy", parsed.force_deploy),
    ]


def build_image_args(parsed: DevSpaceBuildInput) -> List[Directive]:
    return [
        ArrayOption("--image", parsed.images),
        Flag("--force-build", parsed.force_build),
        Flag("--skip-push", parsed.skip_push),
    ]


def logs_args(parsed: DevSpaceLogsInput) -> List[Directive]:
    return [
        Option("--container", parsed.container),
        Flag("--follow", parsed.follow),
        Option("--lines", parsed.lines),
    ]


def list_args(parsed: DevSpaceListInput) -> List[Directive]:
    return [Positional(parsed.resource)]


def enter_args(parsed: DevSpaceEnterInput) -> List[Directive]:
    return [Option("--container", parsed.container)]


def print_args(parsed: DevSpacePrintInput) -> List[Directive]:
    return [Option("--profile", parsed.profile)]


def run_args(parsed: DevSpaceRunInput) -> List[Directive]:
    # Everything after "--" goes to the custom command untouched
    return [
        Positional(parsed.command),
        ArrayOption("--", parsed.args),
    ]


def use_args(parsed: DevSpaceUseInput) -> List[Directive]:
    # Without a name devspace prompts for one
    return [
        Positional(parsed.type),
        Positional(parsed.name),
    ]


def reset_args(parsed: DevSpaceResetInput) -> List[Directive]:
    return [Positional(parsed.type)]


def set_args(parsed: DevSpaceSetInput) -> List[Directive]:
    return [
        Positional(parsed.type),
        Positional(f"{parsed.key}={parsed.value}"),
    ]


def ui_args(parsed: DevSpaceUIInput) -> List[Directive]:
    return [Option("--port", parsed.port)]


def add_args(parsed: DevSpaceAddInput) -> List[Directive]:
    return [
        Positional(parsed.type),
        Positional(parsed.source),
    ]


def remove_args(parsed: DevSpaceRemoveInput) -> List[Directive]:
    return [
        Positional(parsed.type),
        Positional(parsed.name),
    ]


# ============================================================================
# Operation Specs
# ============================================================================

PROJECT_OPERATIONS = [
    OperationSpec(
        name="devspace_dev",
        subcommand="dev",
        description="Start DevSpace development mode - deploys the project and starts "
                    "file sync, port forwarding, and log streaming",
        input_model=DevSpaceDevInput,
        translate=dev_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_deploy",
        subcommand="deploy",
        description="Deploy the DevSpace project to Kubernetes",
        input_model=DevSpaceDeployInput,
        translate=deploy_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_build",
        subcommand="build",
        description="Build Docker images defined in the DevSpace configuration",
        input_model=DevSpaceBuildInput,
        translate=build_image_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_logs",
        subcommand="logs",
        description="Stream logs from containers deployed by DevSpace",
        input_model=DevSpaceLogsInput,
        translate=logs_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_cleanup",
        subcommand="cleanup",
        description="Clean up DevSpace deployments and resources",
        input_model=DevSpaceInput,
        translate=no_arguments,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_purge",
        subcommand="purge",
        description="Remove all DevSpace deployments from the cluster",
        input_model=DevSpaceInput,
        translate=no_arguments,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_list",
        subcommand="list",
        description="List DevSpace resources (deployments, ports, profiles, etc.)",
        input_model=DevSpaceListInput,
        translate=list_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_enter",
        subcommand="enter",
        description="Open an interactive terminal session to a container",
        input_model=DevSpaceEnterInput,
        translate=enter_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_sync",
        subcommand="sync",
        description="Start file synchronization between local files and containers",
        input_model=DevSpaceInput,
        translate=no_arguments,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_open",
        subcommand="open",
        description="Open the current project in the browser",
        input_model=DevSpaceInput,
        translate=no_arguments,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_print",
        subcommand="print",
        description="Print the DevSpace configuration",
        input_model=DevSpacePrintInput,
        translate=print_args,
        requires_project=True,
    ),
    OperationSpec(
        name="devspace_run",
        subcommand="run",
        description="Run a custom command defined in devspace.yaml",
        input_model=DevSpaceRunInput,
        translate=run_args,
        requires_project=True,
    ),
]

GLOBAL_OPERATIONS = [
    OperationSpec(
        name="devspace_init",
        subcommand="init",
        description="Initialize a new DevSpace project in the current directory or specified directory",
        input_model=DevSpaceInitInput,
        translate=init_args,
    ),
    OperationSpec(
        name="devspace_version",
        subcommand="version",
        description="Show DevSpace version information",
        input_model=DevSpaceInput,
        translate=no_arguments,
    ),
    OperationSpec(
        name="devspace_use",
        subcommand="use",
        description="Switch DevSpace context, namespace, or profile",
        input_model=DevSpaceUseInput,
        translate=use_args,
    ),
    OperationSpec(
        name="devspace_reset",
        subcommand="reset",
        description="Reset DevSpace variables, dependencies, or pods",
        input_model=DevSpaceResetInput,
        translate=reset_args,
    ),
    OperationSpec(
        name="devspace_set",
        subcommand="set",
        description="Set DevSpace variables",
        input_model=DevSpaceSetInput,
        translate=set_args,
    ),
    OperationSpec(
        name="devspace_analyze",
        subcommand="analyze",
        description="Analyze the current DevSpace configuration and cluster",
        input_model=DevSpaceInput,
        translate=no_arguments,
    ),
    OperationSpec(
        name="devspace_ui",
        subcommand="ui",
        description="Start the DevSpace localhost UI",
        input_model=DevSpaceUIInput,
        translate=ui_args,
    ),
    OperationSpec(
        name="devspace_add",
        subcommand="add",
        description="Add DevSpace plugins or other resources",
        input_model=DevSpaceAddInput,
        translate=add_args,
    ),
    OperationSpec(
        name="devspace_remove",
        subcommand="remove",
        description="Remove DevSpace plugins or contexts",
        input_model=DevSpaceRemoveInput,
        translate=remove_args,
    ),
]


def register_devspace_operations(registry: OperationRegistry) -> None:
    """Register every DevSpace operation with the given registry."""
    registry.register_all(PROJECT_OPERATIONS)
    registry.register_all(GLOBAL_OPERATIONS)

    logger.info(
        f"Registered {len(PROJECT_OPERATIONS)} project and "
        f"{len(GLOBAL_OPERATIONS)} global DevSpace operations"
    )
