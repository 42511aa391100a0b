import logging
import shutil
from pathlib import Path
from typing import Dict, Any, List, Tuple

from sui_dev_tools.domain.errors import ConfigurationError
from sui_dev_tools.domain.ports.formatter import FormatterPort
from sui_dev_tools.domain.ports.process_runner import ProcessRunnerPort, ProcessResult

logger = logging.getLogger(__name__)


def split_formatter_command(command: str) -> List[str]:
    """The first whitespace-delimited token is the executable, the rest are leading arguments."""
    parts = command.split()
    if not parts:
        raise ConfigurationError("Formatter command is empty")
    return parts


class MoveFormatterAdapter(FormatterPort):
    """Runs the configured Move formatter (movefmt by default)."""

    def __init__(self, config: Dict[str, Any], process_runner: ProcessRunnerPort):
        self.config = config
        self.project_root = Path(config['project']['root_path']).resolve()
        self.process_runner = process_runner
        self.command_parts = split_formatter_command(config.get('formatter', {}).get('command', 'movefmt'))

    def verify_environment(self) -> Tuple[bool, str]:
        executable = self.command_parts[0]
        resolved = shutil.which(executable)
        if resolved is None:
            return False, f"Formatter '{executable}' not found in PATH."
        return True, f"Formatter verified. Using {resolved}"

    async def format_directory(self, directory: Path) -> ProcessResult:
        # A fresh argument list per pass, so one pass never sees another's target.
        command = [*self.command_parts, str(directory)]
        result = await self.process_runner.run(command, self.project_root)
        if result.returncode != 0:
            logger.warning(f"Formatter exited with {result.returncode} for {directory}")
        return result
