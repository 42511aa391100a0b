# src/sui_dev_tools/infrastructure/adapters/diagnostic_parsing/move_diagnostic_parser_adapter.py
"""
Line-oriented parser for the human-readable diagnostics of the Move compiler.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from sui_dev_tools.domain.errors import MalformedDiagnosticBlockError
from sui_dev_tools.domain.models.diagnostics import (
    DiagnosticLocation,
    DiagnosticRecord,
    DiagnosticSet,
    Severity,
)
from sui_dev_tools.domain.ports.diagnostic_parser import DiagnosticParserPort
from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.location_extractor import extract_location
from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.text_sanitizer import sanitize

logger = logging.getLogger(__name__)

WARNING_PREFIX = "warning["
ERROR_PREFIX = "error["


class ScanState(Enum):
    """States of the block scanner."""
    SCANNING = "scanning"
    IN_WARNING_BLOCK = "in_warning_block"
    IN_ERROR_BLOCK = "in_error_block"


@dataclass
class _OpenBlock:
    """Accumulator for the block currently being read."""
    severity: Severity
    code: str
    header: str
    lines: List[str] = field(default_factory=list)
    location: Optional[DiagnosticLocation] = None

    def append(self, line: str) -> None:
        self.lines.append(line)
        if self.location is None:
            self.location = extract_location(line)

    @property
    def body(self) -> str:
        return "".join(f"{line}\n" for line in self.lines).strip()


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_block_terminator(state: ScanState, line: str) -> bool:
    """
    Whether `line` closes the block open in `state`.

    Warning blocks end at their trailing `= ...` annotation line; error blocks
    end at the blank separator line.
    """
    if state is ScanState.IN_WARNING_BLOCK:
        return line.strip().startswith("=")
    if state is ScanState.IN_ERROR_BLOCK:
        return line == ""
    return False


def _code_from_header(header: str, prefix: str) -> str:
    return header[len(prefix):].split("]", 1)[0]


class MoveDiagnosticParserAdapter(DiagnosticParserPort):
    """
    Extracts warnings and errors from `sui move build` / `sui move test` stderr.

    The scanner walks the output one line at a time. A `warning[CODE]` or
    `error[CODE]` line at the start of a line opens a block; the block keeps
    every following line until its terminator, and the first location marker
    inside it gives the record its position.
    """

    def parse_output(self, raw_output: Union[str, bytes]) -> DiagnosticSet:
        diagnostics = DiagnosticSet()
        for record in self.iter_records(sanitize(raw_output)):
            diagnostics.add(record)
        logger.debug(
            "Parsed %d warning(s) and %d error(s) from compiler output",
            len(diagnostics.warnings), len(diagnostics.errors),
        )
        return diagnostics

    def iter_records(self, text: str) -> Iterator[DiagnosticRecord]:
        """
        Yield records in the order their blocks close.

        Raises:
            MalformedDiagnosticBlockError: A block reached its terminator without a location.
        """
        state = ScanState.SCANNING
        block: Optional[_OpenBlock] = None

        for line in split_lines(text):
            if state is ScanState.SCANNING:
                state, block = self._open_block(line)
                continue

            if is_block_terminator(state, line):
                yield self._close_block(block)
                state, block = ScanState.SCANNING, None
                continue

            block.append(line)

        if block is not None:
            record = self._close_at_end_of_stream(block)
            if record is not None:
                yield record

    def _open_block(self, line: str):
        if line.startswith(WARNING_PREFIX):
            block = _OpenBlock(Severity.WARNING, _code_from_header(line, WARNING_PREFIX), header=line)
            block.lines.append(line)
            return ScanState.IN_WARNING_BLOCK, block
        if line.startswith(ERROR_PREFIX):
            block = _OpenBlock(Severity.ERROR, _code_from_header(line, ERROR_PREFIX), header=line)
            block.lines.append(line)
            return ScanState.IN_ERROR_BLOCK, block
        return ScanState.SCANNING, None

    def _close_block(self, block: _OpenBlock) -> DiagnosticRecord:
        if block.location is None:
            raise MalformedDiagnosticBlockError(block.header, block.body)
        return DiagnosticRecord(
            location=block.location,
            code=block.code,
            severity=block.severity,
            body=block.body,
        )

    def _close_at_end_of_stream(self, block: _OpenBlock) -> Optional[DiagnosticRecord]:
        # Truncated capture: keep the diagnostic if we already know where it points.
        if block.location is None:
            logger.warning("Discarding unterminated diagnostic block without location: %r", block.header)
            return None
        logger.debug("Output ended inside block %r, emitting it as is", block.header)
        return self._close_block(block)
