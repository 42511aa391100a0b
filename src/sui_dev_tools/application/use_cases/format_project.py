import logging
from pathlib import Path

from sui_dev_tools.domain.errors import FormatterLaunchError, ProcessLaunchError
from sui_dev_tools.domain.ports.formatter import FormatterPort

logger = logging.getLogger(__name__)

# Formatted in this order, each as its own formatter invocation.
FORMAT_TARGETS = ("sources", "tests")


class FormatProjectUseCase:
    """Formats the `sources` and `tests` directories of a Move project."""

    def __init__(self, formatter: FormatterPort, project_root: Path):
        self.formatter = formatter
        self.project_root = Path(project_root)

    async def execute(self) -> str:
        for phase in FORMAT_TARGETS:
            target = self.project_root / phase
            logger.info(f"Formatting {target}")
            try:
                await self.formatter.format_directory(target)
            except ProcessLaunchError as e:
                raise FormatterLaunchError(phase, e.cause or e, command=e.command) from e
        return "OK"
