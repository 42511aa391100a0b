"""
Removes terminal escape sequences from captured process output.
"""
import re
from typing import Union

# CSI sequences (SGR colours, cursor movement), OSC sequences (window titles,
# hyperlinks), nF charset designations and the remaining two-character
# escapes. Sequences cut off by the end of the capture are removed as well.
_ANSI_PATTERN = re.compile(
    r"""
    \x1b\[[0-?]*[ -/]*[@-~]              # CSI
    | \x1b\][^\x07\x1b]*(?:\x07|\x1b\\)  # OSC, BEL or ST terminated
    | \x1b\[[0-?]*[ -/]*\Z               # truncated CSI
    | \x1b\][^\x07\x1b]*\Z               # truncated OSC
    | \x1b[ -/]+[0-~]                    # nF escapes, e.g. ESC ( B
    | \x1b[@-Z\\-_]                      # Fe escapes
    | \x1b                               # lone ESC
    """,
    re.VERBOSE,
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_PATTERN.sub("", text)


def sanitize(raw_output: Union[str, bytes, None]) -> str:
    """
    Turn a captured stream into plain text ready for parsing.

    Bytes are decoded as UTF-8 with invalid sequences replaced by U+FFFD.
    Never raises.
    """
    if raw_output is None:
        return ""
    if isinstance(raw_output, (bytes, bytearray)):
        raw_output = bytes(raw_output).decode("utf-8", errors="replace")
    return strip_ansi(raw_output)
