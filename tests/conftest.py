import pytest

from sui_dev_tools.domain.ports.process_runner import ProcessResult

WARNING_BLOCK = (
    "warning[W09002]: unused variable\n"
    "   ┌─ ./sources/counter.move:12:13\n"
    "   │\n"
    "12 │         let x = 5;\n"
    "   │             ^ Unused local variable 'x'. Consider removing or prefixing with an underscore: '_x'\n"
    "   │\n"
    "   = This warning can be suppressed with '#[allow(unused_variable)]' applied to the 'module' or module member\n"
)

ERROR_BLOCK = (
    "error[E03005]: unbound unqualified function\n"
    "   ┌─ ./sources/counter.move:20:9\n"
    "   │\n"
    "20 │         missing_fn();\n"
    "   │         ^^^^^^^^^^^^ Unbound function 'missing_fn' in current scope\n"
    "\n"
)

BUILD_PREAMBLE = (
    "INCLUDING DEPENDENCY Sui\n"
    "INCLUDING DEPENDENCY MoveStdlib\n"
    "BUILDING counter\n"
)


def make_result(stdout: str = "", stderr: str = "", returncode: int = 0) -> ProcessResult:
    return ProcessResult(
        command=["sui", "move"],
        returncode=returncode,
        stdout=stdout.encode("utf-8"),
        stderr=stderr.encode("utf-8"),
    )


@pytest.fixture
def config(tmp_path):
    (tmp_path / "sources").mkdir()
    (tmp_path / "tests").mkdir()
    return {
        "project": {"root_path": str(tmp_path)},
        "toolchain": {
            "sui_command": "sui",
            "build_args": ["move", "build", "--force"],
            "test_args": ["move", "test"],
        },
        "formatter": {"command": "movefmt --emit files"},
        "logging": {"level": "DEBUG"},
        "ui": {"enhanced_logging": False},
    }
