import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from sui_dev_tools.application.use_cases.format_project import FormatProjectUseCase
from sui_dev_tools.application.use_cases.validate_project import ValidateProjectUseCase
from sui_dev_tools.cli.adapter_factory import create_tool_registry
from sui_dev_tools.domain.errors import FormatterLaunchError, MalformedDiagnosticBlockError
from sui_dev_tools.domain.models.diagnostics import TestVerdict, ValidationResult
from sui_dev_tools.infrastructure.adk_tools import FormatProjectTool, ValidateProjectTool
from sui_dev_tools.infrastructure.tools.tool_registry import SERVER_INSTRUCTIONS, ToolRegistry


def make_use_case(cls, **kwargs):
    use_case = MagicMock(spec=cls)
    use_case.execute = AsyncMock(**kwargs)
    return use_case


def run_tool(tool):
    return asyncio.run(tool.run_async(args={}, tool_context=None))


def test_format_tool_success():
    tool = FormatProjectTool(make_use_case(FormatProjectUseCase, return_value="OK"))
    assert tool.name == "format_project"
    assert tool.description == "Format project"
    assert run_tool(tool) == {"success": True, "result": "OK"}


def test_format_tool_reports_launch_failure():
    error = FormatterLaunchError("tests", FileNotFoundError(2, "No such file or directory"))
    tool = FormatProjectTool(make_use_case(FormatProjectUseCase, side_effect=error))

    response = run_tool(tool)

    assert response["success"] is False
    assert response["error_type"] == "FormatterLaunchError"
    assert response["error"].startswith("Failed to run formatter on `tests`: ")


def test_validate_tool_returns_payload():
    result = ValidationResult(verdict=TestVerdict.passed())
    tool = ValidateProjectTool(make_use_case(ValidateProjectUseCase, return_value=result))

    response = run_tool(tool)

    assert tool.is_long_running
    assert response == {
        "success": True,
        "result": {"warnings": [], "buildErrors": [], "testResults": "PASSED"},
    }


def test_validate_tool_reports_malformed_output():
    error = MalformedDiagnosticBlockError("error[E02]: broken", "error[E02]: broken")
    tool = ValidateProjectTool(make_use_case(ValidateProjectUseCase, side_effect=error))

    response = run_tool(tool)

    assert response["success"] is False
    assert response["error_type"] == "MalformedDiagnosticBlockError"


def test_unexpected_errors_are_reported():
    tool = ValidateProjectTool(make_use_case(ValidateProjectUseCase, side_effect=RuntimeError("boom")))
    assert run_tool(tool) == {"success": False, "error": "boom", "error_type": "RuntimeError"}


def test_cancellation_is_not_swallowed():
    tool = ValidateProjectTool(make_use_case(ValidateProjectUseCase, side_effect=asyncio.CancelledError()))
    with pytest.raises(asyncio.CancelledError):
        run_tool(tool)


def test_tool_declaration():
    tool = FormatProjectTool(make_use_case(FormatProjectUseCase))
    declaration = tool._get_declaration()
    assert declaration.name == "format_project"
    assert declaration.description == "Format project"


def test_registry_lookup_and_invoke():
    registry = ToolRegistry()
    tool = FormatProjectTool(make_use_case(FormatProjectUseCase, return_value="OK"))
    registry.register_tool(tool)

    assert registry.get_tool("format_project") is tool
    assert registry.list_tools() == ["format_project"]
    assert registry.describe() == [{"name": "format_project", "description": "Format project"}]
    assert asyncio.run(registry.invoke("format_project")) == {"success": True, "result": "OK"}

    with pytest.raises(ValueError):
        registry.get_tool("publish_package")
    with pytest.raises(ValueError):
        registry.register_tool(tool)


def test_factory_registers_both_tools(config):
    registry = create_tool_registry(config)
    assert registry.list_tools() == ["format_project", "validate_project"]
    assert registry.instructions == SERVER_INSTRUCTIONS
