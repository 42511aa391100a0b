# src/sui_dev_tools/infrastructure/adk_tools/validate_project_tool.py
"""
ADK Tool for building the project and running its tests.
"""
import logging
from typing import Dict, Any

from sui_dev_tools.application.use_cases.validate_project import ValidateProjectUseCase
from sui_dev_tools.infrastructure.adk_tools.base import SuiDevTool

logger = logging.getLogger(__name__)


class ValidateProjectTool(SuiDevTool):
    """Tool for building the project and running its tests."""

    def __init__(self, use_case: ValidateProjectUseCase):
        super().__init__(
            name="validate_project",
            description="Builds the project and runs tests",
            is_long_running=True  # A full build and test run can take minutes
        )
        self.use_case = use_case

    async def _execute(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the tool to validate the project.

        Returns:
            Dictionary containing:
                - warnings: Compiler warnings from both phases, deduplicated
                - buildErrors: Compiler errors
                - testResults: None, "PASSED", or "FAILED:\\n\\n<detail>"
        """
        result = await self.use_case.execute()
        payload = result.to_payload()
        logger.info(
            f"Validation finished: {len(payload['warnings'])} warning(s), "
            f"{len(payload['buildErrors'])} error(s), tests: {(payload['testResults'] or 'not run').splitlines()[0]}"
        )
        return payload
