"""
Pre-flight validation for DevSpace tool calls.

Checks run in a fixed order and stop at the first failure:
1. DevSpace CLI is installed and answers `devspace version`
2. The supplied working directory exists, is a directory and is accessible
3. A devspace.yaml/devspace.yml is present (project operations only)
"""

import asyncio
import logging
import os
import stat
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from .process import CommandTimeoutError, invoke

logger = logging.getLogger(__name__)

TOOL_CHECK_TIMEOUT_MS = 10_000

PROJECT_DESCRIPTORS = ("devspace.yaml", "devspace.yml")


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of one validation step or of the whole chain."""
    valid: bool
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Tool presence
# ============================================================================

async def check_tool_presence(program: str = "devspace") -> ValidationOutcome:
    """Run `<program> version` under its own short timeout."""
    try:
        result = await invoke(program, ["version"], timeout_ms=TOOL_CHECK_TIMEOUT_MS)
    except CommandTimeoutError as e:
        return ValidationOutcome(
            valid=False,
            message=f"DevSpace CLI validation error: DevSpace CLI check timed out after "
                    f"{TOOL_CHECK_TIMEOUT_MS // 1000} seconds",
            details={
                "error": type(e).__name__,
                "suggestions": [
                    "Ensure DevSpace CLI is installed and accessible",
                    "Check system PATH configuration",
                    "Verify firewall/antivirus is not blocking the executable",
                ],
            },
        )

    output = "\n".join(part for part in (result.stdout, result.stderr) if part)

    if result.exit_code == 0:
        return ValidationOutcome(
            valid=True,
            message="DevSpace CLI is available",
            details={"version": output},
        )

    return ValidationOutcome(
        valid=False,
        message="DevSpace CLI check failed",
        details={
            "exitCode": result.exit_code,
            "output": output,
            "suggestions": [
                "Install DevSpace CLI: https://devspace.sh/docs/getting-started/installation",
                "Verify DevSpace is in your PATH: devspace version",
                "Check if DevSpace binary has execute permissions",
            ],
        },
    )


# ============================================================================
# Working directory
# ============================================================================

async def check_working_directory(working_directory: Optional[str]) -> ValidationOutcome:
    """Validate that a working directory exists and can be entered and listed."""
    if not working_directory:
        return ValidationOutcome(valid=True, message="Using current working directory")

    absolute_path = os.path.abspath(working_directory)

    try:
        stats = await asyncio.to_thread(os.stat, absolute_path)
    except FileNotFoundError:
        return ValidationOutcome(
            valid=False,
            message=f"Working directory does not exist: {working_directory}",
            details={
                "path": absolute_path,
                "error": "FileNotFoundError",
                "suggestions": [
                    "Verify the path exists",
                    "Check path syntax",
                    "Create the directory if it doesn't exist",
                ],
            },
        )
    except OSError as e:
        return ValidationOutcome(
            valid=False,
            message=f"Working directory validation failed: {e}",
            details={
                "path": absolute_path,
                "error": type(e).__name__,
                "suggestions": [
                    "Verify the path exists",
                    "Check path syntax and permissions",
                    "Ensure the directory is not corrupted",
                ],
            },
        )

    if not stat.S_ISDIR(stats.st_mode):
        return ValidationOutcome(
            valid=False,
            message=f"Specified path is not a directory: {working_directory}",
            details={
                "path": absolute_path,
                "type": "file" if stat.S_ISREG(stats.st_mode) else "unknown",
                "suggestions": [
                    "Specify a valid directory path",
                    "Create the directory if it doesn't exist",
                ],
            },
        )

    accessible = await asyncio.to_thread(os.access, absolute_path, os.R_OK | os.X_OK)
    if not accessible:
        return ValidationOutcome(
            valid=False,
            message=f"Directory is not accessible: {working_directory}",
            details={
                "path": absolute_path,
                "error": "Access denied",
                "suggestions": [
                    "Check directory permissions",
                    "Ensure you have read and execute permissions",
                    "Try running with appropriate privileges",
                ],
            },
        )

    return ValidationOutcome(
        valid=True,
        message=f"Working directory validated: {absolute_path}",
        details={"path": absolute_path},
    )


# ============================================================================
# Project descriptor
# ============================================================================

def _find_descriptor(project_dir: str) -> Tuple[Optional[str], List[str]]:
    search_paths = [os.path.join(project_dir, name) for name in PROJECT_DESCRIPTORS]
    for path in search_paths:
        if os.path.exists(path):
            return path, search_paths
    return None, search_paths


def _read_descriptor(config_path: str) -> os.stat_result:
    with open(config_path, "rb") as f:
        f.read()
        return os.fstat(f.fileno())


async def check_project(working_directory: Optional[str]) -> ValidationOutcome:
    """Look for a readable, non-empty DevSpace configuration file."""
    project_dir = os.path.abspath(working_directory or os.getcwd())
    config_path, search_paths = await asyncio.to_thread(_find_descriptor, project_dir)

    if config_path is None:
        return ValidationOutcome(
            valid=False,
            message=f"No DevSpace configuration found in {project_dir}",
            details={
                "searchPaths": search_paths,
                "suggestions": [
                    "Initialize a DevSpace project first using devspace_init",
                    "Ensure you are in the correct project directory",
                    "Check if the configuration file was accidentally moved or deleted",
                ],
            },
        )

    try:
        stats = await asyncio.to_thread(_read_descriptor, config_path)
    except OSError as e:
        return ValidationOutcome(
            valid=False,
            message=f"Cannot read DevSpace configuration: {e}",
            details={
                "configPath": config_path,
                "error": type(e).__name__,
                "suggestions": [
                    "Check file permissions",
                    "Ensure the file is not corrupted",
                    "Try running with appropriate privileges",
                ],
            },
        )

    if stats.st_size == 0:
        return ValidationOutcome(
            valid=False,
            message=f"DevSpace configuration file is empty: {config_path}",
            details={
                "configPath": config_path,
                "suggestions": [
                    "Reinitialize the project with devspace_init",
                    "Restore from backup if available",
                    "Check file permissions and disk space",
                ],
            },
        )

    return ValidationOutcome(
        valid=True,
        message="DevSpace project found",
        details={
            "configPath": config_path,
            "configSize": stats.st_size,
            "lastModified": datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc).isoformat(),
        },
    )


# ============================================================================
# Chain
# ============================================================================

async def validate_command_requirements(
    tool_name: str,
    working_directory: Optional[str] = None,
    *,
    requires_project: bool,
    program: str = "devspace",
) -> ValidationOutcome:
    """
    Run the validation chain for one tool call.

    Args:
        tool_name: Tool being validated (for messages)
        working_directory: Directory supplied with the call, if any
        requires_project: Whether the tool needs a DevSpace project
        program: DevSpace executable

    Returns:
        The first failing ValidationOutcome, or a success outcome
    """
    cli = await check_tool_presence(program)
    if not cli.valid:
        logger.debug(f"{tool_name}: CLI check failed")
        return cli
    logger.debug(f"{tool_name}: DevSpace CLI available")

    if working_directory:
        directory = await check_working_directory(working_directory)
        if not directory.valid:
            return directory

    if requires_project:
        project = await check_project(working_directory)
        if not project.valid:
            return project

    return ValidationOutcome(
        valid=True,
        message=f"✅ All requirements validated for {tool_name}",
        details={
            "command": tool_name,
            "requiresProject": requires_project,
            "workingDirectory": working_directory or os.getcwd(),
        },
    )
