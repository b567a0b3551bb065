"""
Core Layer - command translation and execution pipeline

Modules:
- arguments: directive fold producing devspace argument lists
- process: child process invocation with timeout and cancellation
- validation: pre-flight checks (CLI, working directory, project)
- formatting: display text for results and errors
"""

from .arguments import (
    ArrayOption,
    BooleanOption,
    Directive,
    Flag,
    Option,
    Positional,
    build_args,
)
from .formatting import format_error, format_output, troubleshooting_suggestions
from .process import (
    DEFAULT_TIMEOUT_MS,
    CommandCancelledError,
    CommandError,
    CommandTimeoutError,
    ProcessResult,
    invoke,
)
from .validation import (
    PROJECT_DESCRIPTORS,
    ValidationOutcome,
    check_project,
    check_tool_presence,
    check_working_directory,
    validate_command_requirements,
)

__all__ = [
    # Arguments
    'ArrayOption',
    'BooleanOption',
    'Directive',
    'Flag',
    'Option',
    'Positional',
    'build_args',
    # Formatting
    'format_error',
    'format_output',
    'troubleshooting_suggestions',
    # Process
    'DEFAULT_TIMEOUT_MS',
    'CommandCancelledError',
    'CommandError',
    'CommandTimeoutError',
    'ProcessResult',
    'invoke',
    # Validation
    'PROJECT_DESCRIPTORS',
    'ValidationOutcome',
    'check_project',
    'check_tool_presence',
    'check_working_directory',
    'validate_command_requirements',
]
