from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from sui_dev_tools.domain.ports.process_runner import ProcessResult


class FormatterPort(ABC):
    """Interface for the source formatter."""

    @abstractmethod
    def verify_environment(self) -> Tuple[bool, str]:
        """Verifies that the formatter executable can be found."""
        pass

    @abstractmethod
    async def format_directory(self, directory: Path) -> ProcessResult:
        """
        Formats every source file under a directory.

        Args:
            directory: Directory passed to the formatter as its final argument.

        Raises:
            ProcessLaunchError: If the formatter could not be started.
        """
        pass
