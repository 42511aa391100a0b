# src/sui_dev_tools/infrastructure/tools/tool_registry.py
"""
Registry of the tools the service exposes to callers.
"""
import logging
from typing import Dict, Any, List, Optional

from google.adk.tools import BaseTool

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = "This server provides tools to help manage a Sui Move project."


class ToolRegistry:
    """
    Looks tools up by the call name a caller delivers.
    """

    def __init__(self, instructions: str = SERVER_INSTRUCTIONS):
        self.instructions = instructions
        self.tools: Dict[str, BaseTool] = {}

    def register_tool(self, tool: BaseTool) -> None:
        """
        Register a tool.

        Args:
            tool: The tool to register

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} already registered")
        self.tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def get_tool(self, name: str) -> BaseTool:
        """
        Get a tool by name.

        Raises:
            ValueError: If the tool is not registered
        """
        if name not in self.tools:
            raise ValueError(f"Tool {name} not registered")
        return self.tools[name]

    async def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run the named tool and return its structured result."""
        tool = self.get_tool(name)
        return await tool.run_async(args=args or {}, tool_context=None)

    def list_tools(self) -> List[str]:
        return list(self.tools.keys())

    def describe(self) -> List[Dict[str, str]]:
        return [{"name": tool.name, "description": tool.description} for tool in self.tools.values()]
