import logging
import shutil
from pathlib import Path
from typing import Dict, Any, List, Tuple

from sui_dev_tools.domain.errors import ProcessLaunchError
from sui_dev_tools.domain.ports.build_system import BuildSystemPort
from sui_dev_tools.domain.ports.process_runner import ProcessRunnerPort, ProcessResult

logger = logging.getLogger(__name__)

DEFAULT_BUILD_ARGS = ["move", "build", "--force"]
# JSON diagnostics (--json-errors) carry less information than the rendered
# output, so the test run is parsed from its human-readable stderr.
DEFAULT_TEST_ARGS = ["move", "test"]


class SuiMoveAdapter(BuildSystemPort):
    """Build system interaction implementation for the Sui Move CLI."""

    def __init__(self, config: Dict[str, Any], process_runner: ProcessRunnerPort):
        self.config = config
        self.project_root = Path(config['project']['root_path']).resolve()
        self.process_runner = process_runner

        toolchain_config = config.get('toolchain', {})
        self.sui_command = toolchain_config.get('sui_command', 'sui')

        # Handle args as either string or list
        build_args = toolchain_config.get('build_args', DEFAULT_BUILD_ARGS)
        self.build_args = build_args.split() if isinstance(build_args, str) else list(build_args)
        test_args = toolchain_config.get('test_args', DEFAULT_TEST_ARGS)
        self.test_args = test_args.split() if isinstance(test_args, str) else list(test_args)

    def verify_environment(self) -> Tuple[bool, str]:
        """Verifies that the Sui CLI is on the executable search path."""
        logger.info("Verifying Sui toolchain environment...")
        resolved = shutil.which(self.sui_command)
        if resolved is None:
            logger.debug(f"Command {self.sui_command} not found in PATH")
            return False, f"Sui CLI '{self.sui_command}' not found in PATH."
        if not self.project_root.is_dir():
            return False, f"Project folder {self.project_root} does not exist."
        return True, f"Sui toolchain verified. Using {resolved}"

    async def build(self) -> ProcessResult:
        return await self._run(self.build_args, "Failed to build project")

    async def test(self) -> ProcessResult:
        return await self._run(self.test_args, "Failed to run tests")

    async def _run(self, args: List[str], failure_message: str) -> ProcessResult:
        command = [self.sui_command, *args]
        try:
            return await self.process_runner.run(command, self.project_root)
        except ProcessLaunchError as e:
            raise ProcessLaunchError(f"{failure_message}: {e}", command=command, cause=e.cause) from e

    def get_build_info(self) -> Dict[str, Any]:
        return {
            "build_system": "sui",
            "command": self.sui_command,
            "build_args": list(self.build_args),
            "test_args": list(self.test_args),
            "project_root": str(self.project_root),
        }
