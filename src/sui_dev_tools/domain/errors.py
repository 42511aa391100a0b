# src/sui_dev_tools/domain/errors.py
"""
Exceptions raised by the project tools.
"""
from typing import List, Optional


class SuiDevToolsError(Exception):
    """Base class for all errors surfaced to tool callers."""


class ConfigurationError(SuiDevToolsError):
    """The application configuration is invalid."""


class ProcessLaunchError(SuiDevToolsError):
    """The OS could not start an external executable."""

    def __init__(self, message: str, command: Optional[List[str]] = None, cause: Optional[OSError] = None):
        super().__init__(message)
        self.command = command or []
        self.cause = cause


class FormatterLaunchError(ProcessLaunchError):
    """A formatting pass could not be started."""

    def __init__(self, phase: str, cause: OSError, command: Optional[List[str]] = None):
        super().__init__(f"Failed to run formatter on `{phase}`: {cause}", command=command, cause=cause)
        self.phase = phase


class MalformedDiagnosticBlockError(SuiDevToolsError):
    """A warning or error block was terminated without a source location."""

    def __init__(self, header: str, partial_body: str):
        super().__init__(
            f"Diagnostic block has no source location: {header!r}"
        )
        self.header = header
        self.partial_body = partial_body
