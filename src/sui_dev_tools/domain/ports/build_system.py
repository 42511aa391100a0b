from abc import ABC, abstractmethod
from typing import Tuple, Dict, Any

from sui_dev_tools.domain.ports.process_runner import ProcessResult


class BuildSystemPort(ABC):
    """Interface for the Move build/test toolchain of a project."""

    @abstractmethod
    def verify_environment(self) -> Tuple[bool, str]:
        """
        Verifies that the toolchain executable can be found.

        Returns:
            Tuple of (success, message).
        """
        pass

    @abstractmethod
    async def build(self) -> ProcessResult:
        """
        Builds the project.

        Raises:
            ProcessLaunchError: If the build could not be started.
        """
        pass

    @abstractmethod
    async def test(self) -> ProcessResult:
        """
        Runs the project's tests.

        Raises:
            ProcessLaunchError: If the test runner could not be started.
        """
        pass

    @abstractmethod
    def get_build_info(self) -> Dict[str, Any]:
        """Returns the toolchain configuration in use."""
        pass
