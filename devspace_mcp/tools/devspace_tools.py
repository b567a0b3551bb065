"""DevSpace CLI tools: validation, translation and execution of tool calls."""

import asyncio
import time
from typing import Any, Dict, List, Optional
from uuid import uuid4

from mcp import Tool

from ..config.settings import ServerContext
from ..core.formatting import format_error, format_output
from ..core.process import CommandError, CommandTimeoutError, invoke
from ..core.validation import validate_command_requirements
from ..registry.operation_registry import (
    OperationNotFound,
    OperationRegistry,
    SchemaViolation,
)
from ..utils.response import error_response, is_success, text_response


def _context(**values: Any) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class DevSpaceTools:
    """Handles tool calls for every operation in the registry."""

    def __init__(self, registry: OperationRegistry, context: ServerContext):
        """Initialize with the operation catalog and server context.

        Args:
            registry: Registry of DevSpace operations
            context: Settings and logger for this server
        """
        self.registry = registry
        self.settings = context.settings
        self.logger = context.logger

    def get_tools(self) -> List[Tool]:
        """Return all DevSpace tools."""
        return [
            Tool(
                name=operation.name,
                description=operation.description,
                inputSchema=operation.input_schema(),
            )
            for operation in self.registry.list()
        ]

    async def handle_tool(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Dict[str, Any]:
        """Run a tool call through validation, translation and execution.

        Args:
            name: Tool name
            arguments: Raw tool arguments
            cancel_event: Aborts the running devspace command when set

        Returns:
            Tool response; failures are reported with isError set, never raised
        """
        request_id = uuid4().hex[:9]
        started = time.monotonic()
        self.logger.info(
            f"Received tool call {name} (request {request_id}, has args: {bool(arguments)})"
        )

        try:
            result = await self._execute(name, arguments, cancel_event)
        except Exception as e:
            duration_ms = int((time.monotonic() - started) * 1000)
            self.logger.exception(
                f"Tool call {name} failed after {duration_ms}ms (request {request_id})"
            )
            return error_response(format_error(name, e, _context(args=arguments)))

        duration_ms = int((time.monotonic() - started) * 1000)
        self.logger.info(
            f"Tool call {name} completed in {duration_ms}ms "
            f"(request {request_id}, error: {not is_success(result)})"
        )
        return result

    async def _execute(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]],
        cancel_event: Optional[asyncio.Event],
    ) -> Dict[str, Any]:
        if not self.registry.exists(name):
            error = OperationNotFound(f"Unknown tool: {name}")
            self.logger.error(f"Unknown tool requested: {name}")
            return error_response(format_error(
                name, error, _context(args=arguments, availableTools=self.registry.names())
            ))

        operation = self.registry.get(name)

        try:
            validated = self.registry.validate_input(name, arguments)
        except SchemaViolation as e:
            self.logger.warning(f"Invalid arguments for {name}: {e.fields}")
            return error_response(format_error(
                name, e, _context(violations=e.violations, args=arguments)
            ))

        working_directory = validated.working_directory
        validation = await validate_command_requirements(
            name,
            working_directory,
            requires_project=operation.requires_project,
            program=self.settings.binary,
        )
        if not validation.valid:
            self.logger.warning(f"Validation failed for {name}: {validation.message}")
            return error_response(format_error(
                name,
                validation.message or "Validation failed",
                _context(**{**validation.details, "args": arguments}),
            ))

        args = [operation.subcommand, *operation.build_args(validated)]
        self.logger.debug(f"Executing {self.settings.binary} {' '.join(args)}")

        try:
            result = await invoke(
                self.settings.binary,
                args,
                working_directory,
                timeout_ms=self.settings.timeout_ms,
                cancel_event=cancel_event,
            )
        except CommandError as e:
            self.logger.warning(f"{name} aborted: {e}")
            timeout = f"{e.timeout_ms}ms" if isinstance(e, CommandTimeoutError) else None
            return error_response(format_error(
                name, e, _context(command=e.command, timeout=timeout, args=arguments)
            ))

        text = f"DevSpace {operation.subcommand} Result:\n\n{format_output(result)}"
        return text_response(text, is_error=not result.succeeded)
