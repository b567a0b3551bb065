"""
Operation registrations for devspace-mcp-server.

Registers the DevSpace tool catalog with an explicitly constructed registry.
"""

from ..operation_registry import OperationRegistry
from .devspace_operations import (
    GLOBAL_OPERATIONS,
    PROJECT_OPERATIONS,
    register_devspace_operations,
)


def build_registry() -> OperationRegistry:
    """Create a registry holding every DevSpace operation."""
    registry = OperationRegistry()
    register_devspace_operations(registry)
    return registry


__all__ = [
    'GLOBAL_OPERATIONS',
    'PROJECT_OPERATIONS',
    'build_registry',
    'register_devspace_operations',
]
