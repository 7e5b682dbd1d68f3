#!/usr/bin/env python3

import click
import pytest

from ts_ppx.cli_utils import generation_comment, reconstruct_command_line
from ts_ppx.ts_ppx import ts_ppx


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(ts_ppx) == "ts_ppx"

    def test_generation_comment_without_context(self):
        assert generation_comment(ts_ppx).startswith("// Generated by ts_ppx v")
        assert generation_comment(ts_ppx).endswith(": ts_ppx")

    def test_reconstruct_command_line_in_context(self):
        """Options with non-default values are listed after the arguments"""
        ctx = click.Context(ts_ppx, info_name="ts_ppx")
        ctx.params = {
            # A path that does not exist is kept as is
            "source_root": "no-such-dir",
            "generators": ("zod", "fast-check"),
            "prettier": True,
            "pattern": None,
            "verbose": False,
        }
        with ctx:
            result = reconstruct_command_line(ts_ppx)
        assert result == "ts_ppx no-such-dir --generator zod --generator fast-check --prettier"


if __name__ == "__main__":
    pytest.main([__file__])
