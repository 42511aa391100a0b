# src/sui_dev_tools/application/use_cases/validate_project.py
import logging

from sui_dev_tools.application.services.result_aggregator import build_failure_result, merge_phase_results
from sui_dev_tools.application.services.test_verdict_classifier import classify_test_output
from sui_dev_tools.domain.models.diagnostics import ValidationResult
from sui_dev_tools.domain.ports.build_system import BuildSystemPort
from sui_dev_tools.domain.ports.diagnostic_parser import DiagnosticParserPort
from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.text_sanitizer import sanitize

logger = logging.getLogger(__name__)


class ValidateProjectUseCase:
    """
    Builds the project and, if it compiles, runs its tests.

    The two phases are strictly sequential: the test runner is only started
    after the build process has exited without errors.
    """

    def __init__(self, build_system: BuildSystemPort, diagnostic_parser: DiagnosticParserPort):
        self.build_system = build_system
        self.diagnostic_parser = diagnostic_parser

    async def execute(self) -> ValidationResult:
        """
        Runs the validate flow.

        Returns:
            ValidationResult with merged warnings, errors and the test verdict
            (None when the build failed).

        Raises:
            ProcessLaunchError: If the build or test process could not be started.
            MalformedDiagnosticBlockError: If compiler output could not be parsed.
        """
        logger.info("Building project...")
        build_output = await self.build_system.build()
        build_diagnostics = self.diagnostic_parser.parse_output(build_output.stderr)
        logger.info(
            f"Build finished with {len(build_diagnostics.warnings)} warning(s) "
            f"and {len(build_diagnostics.errors)} error(s)"
        )

        if build_diagnostics.has_errors:
            logger.info("Build has errors, skipping tests")
            return build_failure_result(build_diagnostics)

        logger.info("Running tests...")
        test_output = await self.build_system.test()
        test_diagnostics = self.diagnostic_parser.parse_output(test_output.stderr)
        verdict = classify_test_output(sanitize(test_output.stdout))
        logger.info(f"Test run classified as {verdict.status.value}")

        return merge_phase_results(build_diagnostics, test_diagnostics, verdict)
