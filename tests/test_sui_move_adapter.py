import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sui_dev_tools.domain.errors import ConfigurationError, ProcessLaunchError
from sui_dev_tools.domain.ports.process_runner import ProcessRunnerPort
from sui_dev_tools.infrastructure.adapters.build_system.sui_move_adapter import SuiMoveAdapter
from sui_dev_tools.infrastructure.adapters.formatter.move_formatter_adapter import (
    MoveFormatterAdapter,
    split_formatter_command,
)

from conftest import make_result


@pytest.fixture
def runner():
    process_runner = MagicMock(spec=ProcessRunnerPort)
    process_runner.run = AsyncMock(return_value=make_result())
    return process_runner


def test_build_and_test_commands(config, runner):
    adapter = SuiMoveAdapter(config, runner)
    root = Path(config["project"]["root_path"]).resolve()

    asyncio.run(adapter.build())
    asyncio.run(adapter.test())

    assert runner.run.await_args_list[0].args == (["sui", "move", "build", "--force"], root)
    assert runner.run.await_args_list[1].args == (["sui", "move", "test"], root)


def test_string_args_are_split(config, runner):
    config["toolchain"]["test_args"] = "move test --gas-limit 1000"
    adapter = SuiMoveAdapter(config, runner)
    assert adapter.test_args == ["move", "test", "--gas-limit", "1000"]


def test_launch_failure_messages(config, runner):
    cause = PermissionError(13, "Permission denied")
    runner.run.side_effect = ProcessLaunchError(str(cause), command=["sui"], cause=cause)
    adapter = SuiMoveAdapter(config, runner)

    with pytest.raises(ProcessLaunchError, match="^Failed to build project: .*Permission denied") as exc_info:
        asyncio.run(adapter.build())
    assert exc_info.value.cause is cause

    with pytest.raises(ProcessLaunchError, match="^Failed to run tests: "):
        asyncio.run(adapter.test())


def test_verify_environment(config, runner):
    adapter = SuiMoveAdapter(config, runner)
    with patch("shutil.which", return_value=None):
        ok, message = adapter.verify_environment()
    assert not ok
    assert "not found" in message

    with patch("shutil.which", return_value="/usr/local/bin/sui"):
        ok, message = adapter.verify_environment()
    assert ok
    assert "/usr/local/bin/sui" in message


def test_formatter_passes_are_independent(config, runner):
    adapter = MoveFormatterAdapter(config, runner)
    root = Path(config["project"]["root_path"]).resolve()

    asyncio.run(adapter.format_directory(root / "sources"))
    asyncio.run(adapter.format_directory(root / "tests"))

    first, second = [c.args[0] for c in runner.run.await_args_list]
    assert first == ["movefmt", "--emit", "files", str(root / "sources")]
    assert second == ["movefmt", "--emit", "files", str(root / "tests")]


def test_split_formatter_command():
    assert split_formatter_command("  movefmt   -v ") == ["movefmt", "-v"]
    with pytest.raises(ConfigurationError):
        split_formatter_command("   ")
