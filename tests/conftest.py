import io
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from rook_ceph.commands import CommandContext
from rook_ceph.config import PluginConfig
from rook_ceph.kubectl import Kubectl
from rook_ceph.themes import get_theme


class FakeRunner:
    """Stands in for `subprocess.run`, recording every argv it is given.

    Responses are matched by a contiguous run of argv tokens; unmatched
    calls succeed with empty output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self._responses: list[tuple[tuple[str, ...], str, int, str]] = []

    def respond(self, *fragment: str, stdout: str = "", returncode: int = 0, stderr: str = ""):
        self._responses.append((fragment, stdout, returncode, stderr))

    @staticmethod
    def _matches(argv: list[str], fragment: tuple[str, ...]) -> bool:
        size = len(fragment)
        return any(
            tuple(argv[i : i + size]) == fragment for i in range(len(argv) - size + 1)
        )

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        self.kwargs.append(kwargs)
        for fragment, stdout, returncode, stderr in self._responses:
            if self._matches(argv, fragment):
                return subprocess.CompletedProcess(argv, returncode, stdout, stderr)
        return subprocess.CompletedProcess(argv, 0, "", "")


def make_console() -> Console:
    return Console(
        file=io.StringIO(), theme=get_theme(), width=200, color_system=None
    )


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def console_factory():
    return make_console


@pytest.fixture
def output_console():
    return make_console()


@pytest.fixture
def context(runner, output_console):
    config = PluginConfig()
    return CommandContext(
        config=config,
        kubectl=Kubectl(config.kubectl_command, runner=runner),
        console=output_console,
    )


@pytest.fixture
def fake_home(monkeypatch, tmp_path):
    """Redirect Path.home() to a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home
