"""Tests for server wiring and process lifecycle handling."""

import asyncio
import signal

import pytest

from devspace_mcp import server as server_module
from devspace_mcp.config.settings import ServerContext, ServerSettings
from devspace_mcp.registry import OperationRegistry
from devspace_mcp.server import DevSpaceMCPServer, ToolCallFailed
from devspace_mcp.utils.response import error_response, text_response


@pytest.fixture
def mcp_server():
    return DevSpaceMCPServer(ServerContext.for_settings(ServerSettings()))


def test_server_uses_full_catalog(mcp_server):
    assert len(mcp_server.registry) == 21
    assert mcp_server.server.name == "devspace-mcp-server"
    assert not mcp_server.fatal


def test_custom_registry():
    registry = OperationRegistry()

    server = DevSpaceMCPServer(ServerContext.for_settings(ServerSettings()), registry)

    assert server.registry is registry
    assert server.devspace_tools.get_tools() == []


@pytest.mark.asyncio
async def test_shutdown_signal_cancels_main_task(mcp_server):
    task = asyncio.ensure_future(asyncio.sleep(30))
    mcp_server._main_task = task

    mcp_server._request_shutdown(signal.SIGTERM)

    with pytest.raises(asyncio.CancelledError):
        await task
    assert not mcp_server.fatal


@pytest.mark.asyncio
async def test_unhandled_loop_error_is_fatal(mcp_server):
    task = asyncio.ensure_future(asyncio.sleep(30))
    mcp_server._main_task = task

    mcp_server._handle_loop_exception(
        asyncio.get_running_loop(),
        {"message": "Task exception was never retrieved", "exception": RuntimeError("boom")},
    )

    with pytest.raises(asyncio.CancelledError):
        await task
    assert mcp_server.fatal


def test_main_rejects_invalid_configuration(monkeypatch, capsys):
    monkeypatch.setenv("DEVSPACE_TIMEOUT", "never")

    with pytest.raises(SystemExit) as exc_info:
        server_module.main()

    assert exc_info.value.code == 1
    assert "Invalid DevSpace MCP server configuration" in capsys.readouterr().err


def test_main_exits_nonzero_after_fatal_error(monkeypatch):
    async def fatal_run(self):
        self.fatal = True

    monkeypatch.setattr(DevSpaceMCPServer, "run", fatal_run)
    monkeypatch.setattr(server_module.ServerContext, "from_env",
                        classmethod(lambda cls: cls.for_settings(ServerSettings())))

    with pytest.raises(SystemExit) as exc_info:
        server_module.main()

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_call_tool_returns_text_on_success(mcp_server, monkeypatch):
    async def handle_tool(name, arguments, cancel_event=None):
        return text_response("DevSpace version Result:\n\n6.3.12")

    monkeypatch.setattr(mcp_server.devspace_tools, "handle_tool", handle_tool)

    content = await mcp_server._call_tool("devspace_version", {})

    assert [block.text for block in content] == ["DevSpace version Result:\n\n6.3.12"]


@pytest.mark.asyncio
async def test_call_tool_raises_on_error_envelope(mcp_server, monkeypatch):
    async def handle_tool(name, arguments, cancel_event=None):
        return error_response("❌ Error in devspace_dev: Command timed out after 10ms")

    monkeypatch.setattr(mcp_server.devspace_tools, "handle_tool", handle_tool)

    with pytest.raises(ToolCallFailed, match="Command timed out after 10ms"):
        await mcp_server._call_tool("devspace_dev", {})
