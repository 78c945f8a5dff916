import logging
import subprocess
from typing import List, Optional, Protocol

from ..config import settings
from ..errors import FormatterError

logger = logging.getLogger(settings.SERVICE_NAME + ".formatter")

# TypeScript parser, no semicolons, trailing commas wherever valid
PRETTIER_OPTIONS = ["--parser", "typescript", "--no-semi", "--trailing-comma", "all"]


class SourceFormatter(Protocol):
    def format(self, source: str) -> str:
        ...


class PrettierFormatter:
    """
    Formats generated source by piping it through Prettier.

    Prettier runs as a separate process; a non-zero exit (usually a syntax
    error in the generated text) or a missing executable raises FormatterError.
    """

    def __init__(self, command: Optional[List[str]] = None, timeout: Optional[float] = None):
        self.command = list(command or settings.PRETTIER_COMMAND)
        self.timeout = timeout if timeout is not None else settings.FORMATTER_TIMEOUT_SECONDS

    def format(self, source: str) -> str:
        args = self.command + PRETTIER_OPTIONS
        logger.debug(f"Running formatter: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                input=source,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatterError(f"Formatter executable not found: {self.command[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise FormatterError(f"Formatter timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"Formatter failed with exit code {e.returncode}: {e.stderr}")
            raise FormatterError(f"Failed to format generated source: {e.stderr.strip()}") from e
        return result.stdout


class PassthroughFormatter:
    """Returns the source unchanged. Used when no formatter is configured."""

    def format(self, source: str) -> str:
        return source


def get_formatter() -> SourceFormatter:
    """Formatter selected by the FORMATTER setting."""
    if settings.FORMATTER == "none":
        return PassthroughFormatter()
    return PrettierFormatter()
