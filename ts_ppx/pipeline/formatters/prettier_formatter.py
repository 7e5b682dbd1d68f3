"""
Prettier formatter for generated TypeScript.
"""

from __future__ import annotations

import subprocess

from ...logging import get_logger
from ..config import FormatterConfig
from .base import Formatter

logger = get_logger("formatters.prettier")


class PrettierFormatter(Formatter):
    """Formatter piping code through the prettier CLI."""

    name = "prettier"

    def __init__(self, config: FormatterConfig | None = None):
        self.config = config or FormatterConfig(enabled=True)
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [*self.config.command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=self.config.timeout,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
            if not self._available:
                logger.warning("prettier is not available (%s); generated code is left unformatted", " ".join(self.config.command))
        return self._available

    def format(self, code: str) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: TypeScript source code to format

        Returns:
            Formatted code, or the input unchanged when prettier is missing or fails
        """
        if not self.is_available():
            return code

        cmd = [*self.config.command, "--parser", self.config.parser]
        if self.config.print_width:
            cmd.extend(["--print-width", str(self.config.print_width)])
        cmd.extend(self.config.extra_args)

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
            )
        except subprocess.SubprocessError as e:
            logger.warning("prettier failed: %s", e)
            return code

        if result.returncode != 0:
            logger.warning("prettier exited with %d: %s", result.returncode, result.stderr.strip())
            return code
        return result.stdout

