# src/sui_dev_tools/application/services/result_aggregator.py
"""
Combines the diagnostics of the build and test phases into a ValidationResult.
"""
import logging
from typing import Optional

from sui_dev_tools.domain.models.diagnostics import DiagnosticSet, TestVerdict, ValidationResult

logger = logging.getLogger(__name__)


def build_failure_result(build_diagnostics: DiagnosticSet) -> ValidationResult:
    """Result for a project that failed to build. Tests never ran, so there is no verdict."""
    return ValidationResult(
        warnings=tuple(build_diagnostics.sorted_warnings()),
        errors=tuple(build_diagnostics.sorted_errors()),
        verdict=None,
    )


def merge_phase_results(
    build_diagnostics: DiagnosticSet,
    test_diagnostics: DiagnosticSet,
    verdict: Optional[TestVerdict],
) -> ValidationResult:
    """
    Merge the build warnings into the test-phase diagnostics.

    Build warnings overwrite test warnings with the same identity. Errors
    come from the test phase only, since the build phase had none.

    Args:
        build_diagnostics: Diagnostics of the error-free build.
        test_diagnostics: Diagnostics parsed from the test runner's stderr.
        verdict: Classified test outcome.
    """
    merged = DiagnosticSet(
        warnings=dict(test_diagnostics.warnings),
        errors=dict(test_diagnostics.errors),
    )
    merged.merge(build_diagnostics)
    logger.debug(
        "Merged %d build warning(s) into %d test warning(s): %d unique",
        len(build_diagnostics.warnings), len(test_diagnostics.warnings), len(merged.warnings),
    )
    return ValidationResult(
        warnings=tuple(merged.sorted_warnings()),
        errors=tuple(merged.sorted_errors()),
        verdict=verdict,
    )
