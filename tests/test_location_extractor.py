import pytest

from sui_dev_tools.domain.models.diagnostics import DiagnosticLocation
from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.location_extractor import extract_location


def test_extracts_file_line_and_column():
    assert extract_location("  ┌─ sources/a.move:10:5") == DiagnosticLocation("sources/a.move", 10, 5)


def test_extra_fields_are_ignored():
    assert extract_location("┌─ ./sources/b.move:3:7:extra") == DiagnosticLocation("./sources/b.move", 3, 7)


@pytest.mark.parametrize("line", [
    "sources/a.move:10:5",             # no marker
    "   │ let x = 1;",                  # body line
    "  ┌─ sources/a.move",              # no numbers
    "  ┌─ sources/a.move:10",           # column missing
    "  ┌─ sources/a.move:ten:5",        # not a number
    "  ┌─ sources/a.move:10:-5",        # negative
    "  ┌─ sources/a.move:10:5 ",        # trailing space after the column
    "  ┌─ sources/a.move:1_0:5",        # underscores are not digits
    "  ┌─ sources/a.move:+5:1",         # sign prefixes are not digits
    "  ┌─ sources/a.move:4294967296:1",  # exceeds u32
    "",
])
def test_non_matching_lines_return_none(line):
    assert extract_location(line) is None


def test_u32_max_is_accepted():
    assert extract_location("┌─ a.move:4294967295:0") == DiagnosticLocation("a.move", 4294967295, 0)
