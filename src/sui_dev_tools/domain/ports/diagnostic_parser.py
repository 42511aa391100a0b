from abc import ABC, abstractmethod
from typing import Union

from sui_dev_tools.domain.models.diagnostics import DiagnosticSet


class DiagnosticParserPort(ABC):
    """Interface for extracting diagnostics from compiler output."""

    @abstractmethod
    def parse_output(self, raw_output: Union[str, bytes]) -> DiagnosticSet:
        """
        Parses a captured compiler stream.

        Args:
            raw_output: Raw stderr of the build or test process, possibly ANSI-coloured.

        Returns:
            DiagnosticSet with warnings and errors keyed by identity.

        Raises:
            MalformedDiagnosticBlockError: If a terminated block carried no source location.
        """
        pass
