# src/sui_dev_tools/infrastructure/adk_tools/format_project_tool.py
"""
ADK Tool for formatting the Move sources and tests of the project.
"""
import logging
from typing import Dict, Any

from sui_dev_tools.application.use_cases.format_project import FormatProjectUseCase
from sui_dev_tools.infrastructure.adk_tools.base import SuiDevTool

logger = logging.getLogger(__name__)


class FormatProjectTool(SuiDevTool):
    """Tool for running the formatter over the project."""

    def __init__(self, use_case: FormatProjectUseCase):
        super().__init__(name="format_project", description="Format project")
        self.use_case = use_case

    async def _execute(self, parameters: Dict[str, Any]) -> str:
        return await self.use_case.execute()
