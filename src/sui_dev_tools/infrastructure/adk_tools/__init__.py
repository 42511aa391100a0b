# src/sui_dev_tools/infrastructure/adk_tools/__init__.py
"""
ADK Tools package for the Sui project tools.
This package contains tools that integrate with Google's Agent Development Kit (ADK).
"""

# Base classes
from sui_dev_tools.infrastructure.adk_tools.base import SuiDevTool

# Tools
from sui_dev_tools.infrastructure.adk_tools.format_project_tool import FormatProjectTool
from sui_dev_tools.infrastructure.adk_tools.validate_project_tool import ValidateProjectTool

__all__ = [
    'SuiDevTool',
    'FormatProjectTool',
    'ValidateProjectTool',
]
