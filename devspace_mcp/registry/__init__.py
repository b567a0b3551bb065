"""
Operation Registry for devspace-mcp-server.

Provides typed, discoverable catalog of DevSpace operations.
"""

from .operation_registry import (
    OperationRegistry,
    OperationSpec,
    ValidatedInput,
    # Exceptions
    InvalidOperationSpec,
    OperationAlreadyRegistered,
    OperationNotFound,
    OperationRegistryError,
    SchemaViolation,
)

__all__ = [
    'OperationRegistry',
    'OperationSpec',
    'ValidatedInput',
    # Exceptions
    'InvalidOperationSpec',
    'OperationAlreadyRegistered',
    'OperationNotFound',
    'OperationRegistryError',
    'SchemaViolation',
]
