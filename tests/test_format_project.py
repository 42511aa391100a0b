import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from sui_dev_tools.application.use_cases.format_project import FormatProjectUseCase
from sui_dev_tools.domain.errors import FormatterLaunchError, ProcessLaunchError
from sui_dev_tools.domain.ports.formatter import FormatterPort

from conftest import make_result


def make_formatter(side_effect=None):
    formatter = MagicMock(spec=FormatterPort)
    formatter.format_directory = AsyncMock(return_value=make_result(), side_effect=side_effect)
    return formatter


def test_formats_sources_then_tests(tmp_path):
    formatter = make_formatter()

    result = asyncio.run(FormatProjectUseCase(formatter, tmp_path).execute())

    assert result == "OK"
    assert formatter.format_directory.await_args_list == [
        call(tmp_path / "sources"),
        call(tmp_path / "tests"),
    ]


def test_nonzero_formatter_exit_is_not_an_error(tmp_path):
    formatter = make_formatter()
    formatter.format_directory.return_value = make_result(returncode=3)
    assert asyncio.run(FormatProjectUseCase(formatter, tmp_path).execute()) == "OK"


@pytest.mark.parametrize("failing_phase", ["sources", "tests"])
def test_launch_failure_names_the_phase(tmp_path, failing_phase):
    cause = FileNotFoundError(2, "No such file or directory", "movefmt")

    async def format_directory(directory: Path):
        if directory.name == failing_phase:
            raise ProcessLaunchError(str(cause), command=["movefmt"], cause=cause)
        return make_result()

    formatter = MagicMock(spec=FormatterPort)
    formatter.format_directory = format_directory

    with pytest.raises(FormatterLaunchError) as exc_info:
        asyncio.run(FormatProjectUseCase(formatter, tmp_path).execute())

    assert exc_info.value.phase == failing_phase
    assert exc_info.value.cause is cause
    assert str(exc_info.value).startswith(f"Failed to run formatter on `{failing_phase}`: ")
    assert "No such file or directory" in str(exc_info.value)
