"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest

from chuk_mcp_spelling import __version__
from chuk_mcp_spelling.server import build_parser


class TestCommandLine:
    """Tests for the argument parser."""

    def test_defaults(self) -> None:
        """stdio on port 8000 with the default project scales."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.scales_dir is None
        assert args.debug is False

    def test_scales_dir(self, temp_dir: Path) -> None:
        """--scales-dir is parsed as a path."""
        args = build_parser().parse_args(["--scales-dir", str(temp_dir)])
        assert args.scales_dir == temp_dir

    def test_http(self) -> None:
        """http transport takes a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9001"])
        assert args.transport == "http"
        assert args.port == 9001

    def test_unknown_transport(self) -> None:
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the package version and exits."""
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out
