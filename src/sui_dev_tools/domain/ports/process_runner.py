from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass
class ProcessResult:
    """Captured result of an external process that ran to completion."""
    command: List[str]
    returncode: int
    stdout: bytes
    stderr: bytes
    execution_time: Optional[float] = None  # Seconds


class ProcessRunnerPort(ABC):
    """Interface for running external executables."""

    @abstractmethod
    async def run(self, command: List[str], cwd: Path) -> ProcessResult:
        """
        Runs a command to completion and captures its output.

        Args:
            command: Executable followed by its arguments.
            cwd: Working directory for the process.

        Returns:
            ProcessResult with the exit status and raw stdout/stderr bytes.

        Raises:
            ProcessLaunchError: If the executable could not be started.
        """
        pass
