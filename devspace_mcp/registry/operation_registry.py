"""
Operation Registry - Typed catalog of DevSpace operations.

Provides:
- Operation specs binding a tool name to its devspace subcommand
- Input validation through per-operation pydantic models
- Argument translation through per-operation directive lists
- The project-required / global partition used by the validation chain
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from ..core.arguments import Directive, build_args

logger = logging.getLogger(__name__)

# Type aliases
ValidatedInput = BaseModel
Translator = Callable[[Any], List[Directive]]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class OperationSpec:
    """
    Describes one DevSpace tool.

    The translator returns directives in the exact order the devspace
    subcommand expects them.
    """
    name: str                          # Tool identifier (e.g., "devspace_build")
    subcommand: str                    # devspace subcommand (e.g., "build")
    description: str                   # Human-readable description
    input_model: Type[BaseModel]       # Input schema
    translate: Translator              # ValidatedInput -> directives
    requires_project: bool = False     # Needs devspace.yaml in the working directory

    def build_args(self, validated: ValidatedInput) -> List[str]:
        """Translate validated input into the argument list after the subcommand."""
        return build_args(self.translate(validated))

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema of the operation's input, using wire field names."""
        return self.input_model.model_json_schema(by_alias=True)


# ============================================================================
# Exceptions
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class OperationNotFound(OperationRegistryError):
    """Operation not found in registry."""
    pass


class OperationAlreadyRegistered(OperationRegistryError):
    """Operation already registered."""
    pass


class InvalidOperationSpec(OperationRegistryError):
    """Invalid operation spec."""
    pass


class SchemaViolation(OperationRegistryError):
    """Tool arguments do not match the operation's input schema."""

    def __init__(self, operation_name: str, violations: List[Dict[str, str]]):
        self.operation_name = operation_name
        self.violations = violations
        summary = "; ".join(f"{v['field']}: {v['message']}" for v in violations)
        super().__init__(f"Invalid arguments for {operation_name}: {summary}")

    @property
    def fields(self) -> List[str]:
        return [v["field"] for v in self.violations]


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """Catalog of DevSpace operations keyed by tool name."""

    def __init__(self):
        """Initialize registry."""
        self._operations: Dict[str, OperationSpec] = {}

    # ========================================================================
    # Registration
    # ========================================================================

    def register(self, operation: OperationSpec) -> None:
        """
        Register a new operation.

        Args:
            operation: Operation spec to register

        Raises:
            OperationAlreadyRegistered: If operation name already exists
            InvalidOperationSpec: If spec validation fails
        """
        self._validate_spec(operation)

        if operation.name in self._operations:
            raise OperationAlreadyRegistered(
                f"Operation '{operation.name}' already registered"
            )

        self._operations[operation.name] = operation

        logger.debug(
            f"Registered operation: {operation.name} "
            f"(subcommand: {operation.subcommand}, requires project: {operation.requires_project})"
        )

    def register_all(self, operations: List[OperationSpec]) -> None:
        """Register multiple operations at once."""
        for operation in operations:
            self.register(operation)

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> OperationSpec:
        """
        Retrieve an operation by name.

        Raises:
            OperationNotFound: If operation doesn't exist
        """
        if name not in self._operations:
            raise OperationNotFound(f"Unknown tool: {name}")

        return self._operations[name]

    def list(self, requires_project: Optional[bool] = None) -> List[OperationSpec]:
        """
        List operations, optionally filtered by project requirement.

        Args:
            requires_project: True for project operations, False for global ones

        Returns:
            List of operation specs in registration order
        """
        operations = list(self._operations.values())
        if requires_project is not None:
            operations = [op for op in operations if op.requires_project == requires_project]
        return operations

    def names(self) -> List[str]:
        return list(self._operations)

    def exists(self, name: str) -> bool:
        """Check if operation exists."""
        return name in self._operations

    def project_required(self) -> List[str]:
        """Names of operations that need a DevSpace project."""
        return [op.name for op in self.list(requires_project=True)]

    def global_operations(self) -> List[str]:
        """Names of operations that run anywhere."""
        return [op.name for op in self.list(requires_project=False)]

    def __len__(self) -> int:
        return len(self._operations)

    # ========================================================================
    # Validation
    # ========================================================================

    def validate_input(self, name: str, raw: Any) -> ValidatedInput:
        """
        Validate raw tool arguments against the operation's input model.

        Args:
            name: Operation name
            raw: Untyped arguments from the tool call (None means no arguments)

        Returns:
            Instance of the operation's input model

        Raises:
            OperationNotFound: If operation doesn't exist
            SchemaViolation: If a field is missing or has the wrong type
        """
        operation = self.get(name)

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise SchemaViolation(
                name,
                [{"field": "(root)", "message": f"expected an object, got {type(raw).__name__}"}],
            )

        try:
            return operation.input_model.model_validate(raw)
        except ValidationError as e:
            violations = [
                {
                    "field": ".".join(str(part) for part in error["loc"]) or "(root)",
                    "message": error["msg"],
                }
                for error in e.errors()
            ]
            raise SchemaViolation(name, violations) from e

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _validate_spec(self, operation: OperationSpec) -> None:
        """
        Validate operation spec.

        Raises:
            InvalidOperationSpec: If validation fails
        """
        if not operation.name:
            raise InvalidOperationSpec("Operation name is required")

        if not operation.subcommand:
            raise InvalidOperationSpec(f"Operation '{operation.name}' needs a subcommand")

        if not operation.description:
            raise InvalidOperationSpec(f"Operation '{operation.name}' needs a description")

        if not callable(operation.translate):
            raise InvalidOperationSpec(f"Operation '{operation.name}' needs a translator")

        if not (isinstance(operation.input_model, type) and issubclass(operation.input_model, BaseModel)):
            raise InvalidOperationSpec(
                f"Operation '{operation.name}' input model must be a pydantic model"
            )
