"""
Child process invocation for the DevSpace CLI.

Runs one external program per call with:
- Incremental stdout/stderr capture
- Timeout enforced by a timer racing the process
- Cancellation through an asyncio.Event or task cancellation
- Launch failures reported as results, not exceptions

The program is executed directly (never through a shell), so argument
tokens reach it verbatim.
"""

import asyncio
import logging
import os
from contextlib import suppress
from dataclasses import dataclass
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 300_000

# Seconds a terminated child gets to exit before SIGKILL
KILL_GRACE_SECONDS = 5.0

_READ_CHUNK = 64 * 1024


class CommandError(Exception):
    """Base exception for aborted command executions."""
    pass


class CommandTimeoutError(CommandError):
    """Raised when a command outlives its timeout."""

    def __init__(self, timeout_ms: int, command: Optional[str] = None):
        self.timeout_ms = timeout_ms
        self.command = command
        super().__init__(f"Command timed out after {timeout_ms}ms")


class CommandCancelledError(CommandError):
    """Raised when the caller cancels a running command."""

    def __init__(self, command: Optional[str] = None):
        self.command = command
        super().__init__("Command was aborted")


@dataclass(frozen=True)
class ProcessResult:
    """Normalized outcome of a finished child process."""
    stdout: str
    stderr: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def _decode(chunks: List[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace").strip()


def _normalize_exit_code(returncode: Optional[int]) -> int:
    # Signal terminations surface as negative return codes
    if returncode is None or returncode < 0:
        return 0
    return returncode


async def _drain(stream: Optional[asyncio.StreamReader], chunks: List[bytes]) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            break
        chunks.append(chunk)


async def _run_to_exit(
    process: asyncio.subprocess.Process,
    stdout_chunks: List[bytes],
    stderr_chunks: List[bytes],
) -> Optional[int]:
    await asyncio.gather(
        _drain(process.stdout, stdout_chunks),
        _drain(process.stderr, stderr_chunks),
    )
    return await process.wait()


async def _abort(process: asyncio.subprocess.Process, completion: "asyncio.Future") -> None:
    """Terminate the child, reap it and discard the pending drain task."""
    if process.returncode is None:
        with suppress(ProcessLookupError):
            process.terminate()
        try:
            await asyncio.wait_for(process.wait(), KILL_GRACE_SECONDS)
        except asyncio.TimeoutError:
            logger.warning(
                f"Process {process.pid} ignored SIGTERM for {KILL_GRACE_SECONDS}s, killing"
            )
            with suppress(ProcessLookupError):
                process.kill()
            await process.wait()

    completion.cancel()
    await asyncio.gather(completion, return_exceptions=True)


async def invoke(
    program: str,
    args: Sequence[str],
    working_directory: Optional[str] = None,
    *,
    timeout_ms: Optional[int] = DEFAULT_TIMEOUT_MS,
    cancel_event: Optional[asyncio.Event] = None,
) -> ProcessResult:
    """
    Run an external program and collect its output.

    Args:
        program: Executable name or path
        args: Argument tokens passed verbatim after the program name
        working_directory: Directory to run in (defaults to the current one)
        timeout_ms: Timeout in milliseconds; 0 or None disables it
        cancel_event: Event that aborts the run when set

    Returns:
        ProcessResult with stripped stdout/stderr. Launch failures yield
        exit code 1 with the OS error message as stderr.

    Raises:
        CommandTimeoutError: If the timeout elapses first
        CommandCancelledError: If cancel_event is set first
    """
    cwd = working_directory or os.getcwd()
    command = " ".join([program, *args])
    logger.debug(f"Spawning '{command}' in {cwd}")

    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *args,
            cwd=cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.debug(f"Failed to spawn '{program}': {e}")
        return ProcessResult(stdout="", stderr=str(e), exit_code=1)

    stdout_chunks: List[bytes] = []
    stderr_chunks: List[bytes] = []
    completion = asyncio.ensure_future(_run_to_exit(process, stdout_chunks, stderr_chunks))

    waiters = {completion}
    cancel_waiter = None
    if cancel_event is not None:
        cancel_waiter = asyncio.ensure_future(cancel_event.wait())
        waiters.add(cancel_waiter)

    timeout = timeout_ms / 1000 if timeout_ms and timeout_ms > 0 else None

    try:
        done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        await _abort(process, completion)
        raise
    finally:
        if cancel_waiter is not None:
            cancel_waiter.cancel()

    if completion in done:
        exit_code = _normalize_exit_code(completion.result())
        logger.debug(f"'{command}' exited with code {exit_code}")
        return ProcessResult(
            stdout=_decode(stdout_chunks),
            stderr=_decode(stderr_chunks),
            exit_code=exit_code,
        )

    await _abort(process, completion)

    if cancel_waiter is not None and cancel_waiter in done:
        logger.info(f"'{command}' cancelled by caller")
        raise CommandCancelledError(command)

    logger.warning(f"'{command}' timed out after {timeout_ms}ms")
    raise CommandTimeoutError(timeout_ms, command)
