"""Main MCP server implementation for the DevSpace CLI."""

import asyncio
import signal
import sys
from typing import Any, Dict, Optional

from mcp import Tool
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import TextContent
from pydantic import ValidationError

from .config.settings import ServerContext
from .registry.operation_registry import OperationRegistry
from .registry.operations import build_registry
from .tools.devspace_tools import DevSpaceTools
from .utils.response import is_success, response_text


class ToolCallFailed(Exception):
    """Carries the display text of a failed tool call to the MCP layer.

    The SDK turns exceptions raised from a call_tool handler into a
    result with isError set and the exception text as content.
    """
    pass


class DevSpaceMCPServer:
    """MCP Server exposing DevSpace CLI operations as tools."""

    def __init__(self, context: ServerContext, registry: Optional[OperationRegistry] = None):
        """Initialize the MCP server.

        Args:
            context: Settings and logger built at process start
            registry: Operation catalog (defaults to every DevSpace operation)
        """
        self.context = context
        self.logger = context.logger
        self.registry = registry if registry is not None else build_registry()
        self.devspace_tools = DevSpaceTools(self.registry, context)

        self.fatal = False
        self._main_task: Optional[asyncio.Task] = None

        # Create MCP server instance
        self.server = Server(context.settings.name)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List all available tools."""
            tools = self.devspace_tools.get_tools()
            self.logger.debug(f"Listing {len(tools)} tools")
            return tools

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
            """Route tool calls through the DevSpace pipeline."""
            return await self._call_tool(name, arguments)

    async def _call_tool(self, name: str, arguments: Optional[dict]) -> list[TextContent]:
        result = await self.devspace_tools.handle_tool(name, arguments)
        text = response_text(result)
        if not is_success(result):
            raise ToolCallFailed(text)
        return [TextContent(type="text", text=text)]

    # ========================================================================
    # Process lifecycle
    # ========================================================================

    def _request_shutdown(self, sig: signal.Signals) -> None:
        self.logger.info(f"Received {sig.name}, shutting down gracefully")
        if self._main_task is not None:
            self._main_task.cancel()

    def _handle_loop_exception(self, loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
        # Errors that escape every request context leave the server in an unknown state
        exception = context.get("exception")
        self.logger.critical(
            f"Unhandled error outside request handling: {context.get('message')}",
            exc_info=exception,
        )
        self.fatal = True
        if self._main_task is not None:
            self._main_task.cancel()

    def _install_process_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(self._handle_loop_exception)
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._request_shutdown, sig)
            except (NotImplementedError, RuntimeError):
                # Not supported by this event loop (e.g. on Windows)
                pass

    async def run(self):
        """Run the MCP server over stdio until shutdown."""
        from mcp.server.stdio import stdio_server

        settings = self.context.settings
        self._main_task = asyncio.current_task()
        self._install_process_handlers()

        async with stdio_server() as (read_stream, write_stream):
            self.logger.info(
                f"DevSpace MCP server running on stdio "
                f"({len(self.registry)} tools, timeout {settings.timeout_ms}ms, "
                f"max retries {settings.max_retries}, log level {settings.log_level})"
            )
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=settings.name,
                    server_version=settings.version,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )


def main():
    """Main entry point for the MCP server."""
    try:
        context = ServerContext.from_env()
    except ValidationError as e:
        # Logging is not configured yet; report straight to stderr
        print(f"Invalid DevSpace MCP server configuration:\n{e}", file=sys.stderr)
        sys.exit(1)

    settings = context.settings
    context.logger.info(
        f"Starting DevSpace MCP Server v{settings.version} "
        f"(binary: {settings.binary}, log level: {settings.log_level})"
    )

    server = DevSpaceMCPServer(context)
    try:
        asyncio.run(server.run())
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    except Exception:
        context.logger.exception("Fatal error in main()")
        sys.exit(1)

    if server.fatal:
        sys.exit(1)
    context.logger.info("DevSpace MCP server stopped")


if __name__ == "__main__":
    main()
