"""
Async runner for external toolchain processes.
"""
import asyncio
import logging
import time
from pathlib import Path
from typing import List

from sui_dev_tools.domain.errors import ProcessLaunchError
from sui_dev_tools.domain.ports.process_runner import ProcessRunnerPort, ProcessResult

logger = logging.getLogger(__name__)


class AsyncProcessRunner(ProcessRunnerPort):
    """
    Runs a command with captured stdout/stderr without blocking the event loop.

    Every call owns its own process. If the awaiting task is cancelled, or
    anything else interrupts the wait, the child is killed and reaped before
    the exception propagates.
    """

    async def run(self, command: List[str], cwd: Path) -> ProcessResult:
        command_str = " ".join(command)
        logger.info(f"Executing command: {command_str} (cwd: {cwd})")

        start_time = time.time()
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(cwd),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"Could not start {command[0]!r}: {e}")
            raise ProcessLaunchError(str(e), command=command, cause=e) from e

        try:
            stdout, stderr = await process.communicate()
        except BaseException:
            await self._kill(process, command_str)
            raise

        execution_time = time.time() - start_time
        logger.debug(f"Command {command_str} exited with {process.returncode} after {execution_time:.2f} seconds")
        return ProcessResult(
            command=list(command),
            returncode=process.returncode,
            stdout=stdout,
            stderr=stderr,
            execution_time=execution_time,
        )

    async def _kill(self, process: asyncio.subprocess.Process, command_str: str) -> None:
        if process.returncode is not None:
            return
        logger.warning(f"Killing interrupted process {process.pid}: {command_str}")
        try:
            process.kill()
        except ProcessLookupError:
            return
        # Reap the child even though the surrounding task is being cancelled.
        await asyncio.shield(process.wait())
