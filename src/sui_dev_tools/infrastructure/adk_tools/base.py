# src/sui_dev_tools/infrastructure/adk_tools/base.py
"""
Base class for the project tools exposed through the Agent Development Kit.
"""
import logging
from typing import Dict, Any, Optional

from google.adk.tools import BaseTool
from google.genai import types

from sui_dev_tools.domain.errors import SuiDevToolsError

logger = logging.getLogger(__name__)


class SuiDevTool(BaseTool):
    """
    Base class for all Sui project tools.

    Subclasses implement `_execute`. The result handed back to the caller is
    always a dictionary: `{"success": True, "result": ...}` on success, or
    `{"success": False, "error": ..., "error_type": ...}` on failure.
    Cancellation is not a failure and propagates to the caller.
    """

    def __init__(self, name: str, description: str, is_long_running: bool = False):
        super().__init__(name=name, description=description, is_long_running=is_long_running)
        logger.debug(f"Initialized tool: {name}")

    def _get_declaration(self) -> Optional[types.FunctionDeclaration]:
        # None of the tools take parameters; the project comes from configuration.
        return types.FunctionDeclaration(name=self.name, description=self.description)

    async def run_async(self, *, args: Dict[str, Any], tool_context: Any) -> Dict[str, Any]:
        """
        Run the tool with the given arguments and context.

        Args:
            args: The arguments for the tool
            tool_context: The context for the tool

        Returns:
            The result of running the tool
        """
        logger.debug(f"Running tool {self.name} with arguments: {args}")
        try:
            result = await self._execute(args or {})
        except SuiDevToolsError as e:
            logger.error(f"Tool {self.name} failed: {e}")
            return {"success": False, "error": str(e), "error_type": type(e).__name__}
        except Exception as e:
            logger.error(f"Unexpected error running tool {self.name}: {e}", exc_info=True)
            return {"success": False, "error": str(e), "error_type": type(e).__name__}
        logger.debug(f"Tool {self.name} execution successful")
        return {"success": True, "result": result}

    async def _execute(self, parameters: Dict[str, Any]) -> Any:
        """
        Execute the tool's core functionality.
        This method should be overridden by subclasses.
        """
        raise NotImplementedError(f"Tool {self.name} does not implement _execute")
