import logging
from pathlib import Path
from typing import Dict, Any

# Import necessary adapters
from sui_dev_tools.infrastructure.adapters.build_system.sui_move_adapter import SuiMoveAdapter
from sui_dev_tools.infrastructure.adapters.diagnostic_parsing.move_diagnostic_parser_adapter import MoveDiagnosticParserAdapter
from sui_dev_tools.infrastructure.adapters.formatter.move_formatter_adapter import MoveFormatterAdapter
from sui_dev_tools.infrastructure.utils.process_runner import AsyncProcessRunner

# Import use cases
from sui_dev_tools.application.use_cases.format_project import FormatProjectUseCase
from sui_dev_tools.application.use_cases.validate_project import ValidateProjectUseCase

# Import ADK tools
from sui_dev_tools.infrastructure.adk_tools import FormatProjectTool, ValidateProjectTool
from sui_dev_tools.infrastructure.tools.tool_registry import ToolRegistry

# Import necessary ports (for type hinting)
from sui_dev_tools.domain.ports.build_system import BuildSystemPort
from sui_dev_tools.domain.ports.diagnostic_parser import DiagnosticParserPort
from sui_dev_tools.domain.ports.formatter import FormatterPort
from sui_dev_tools.domain.ports.process_runner import ProcessRunnerPort

logger = logging.getLogger(__name__)


def create_process_runner() -> ProcessRunnerPort:
    logger.debug("Creating AsyncProcessRunner")
    return AsyncProcessRunner()


def create_build_system(config: Dict[str, Any], process_runner: ProcessRunnerPort) -> BuildSystemPort:
    logger.debug("Creating SuiMoveAdapter")
    return SuiMoveAdapter(config, process_runner)


def create_formatter(config: Dict[str, Any], process_runner: ProcessRunnerPort) -> FormatterPort:
    logger.debug(f"Creating MoveFormatterAdapter for command: {config.get('formatter', {}).get('command')}")
    return MoveFormatterAdapter(config, process_runner)


def create_diagnostic_parser() -> DiagnosticParserPort:
    return MoveDiagnosticParserAdapter()


def create_tool_registry(config: Dict[str, Any]) -> ToolRegistry:
    """Wires adapters, use cases and tools for one configured project."""
    process_runner = create_process_runner()
    build_system = create_build_system(config, process_runner)
    formatter = create_formatter(config, process_runner)

    registry = ToolRegistry()
    registry.register_tool(FormatProjectTool(
        FormatProjectUseCase(formatter, Path(config['project']['root_path']))
    ))
    registry.register_tool(ValidateProjectTool(
        ValidateProjectUseCase(build_system, create_diagnostic_parser())
    ))
    logger.info(f"Registered tools: {', '.join(registry.list_tools())}")
    return registry
