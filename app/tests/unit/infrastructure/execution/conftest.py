"""Feature-level fixtures for sterile execution tests."""

import io

import pytest

from tests.factories.execution import make_settings
from tests.factories.locales import make_selection


@pytest.fixture
def selection():
    return make_selection("en_US.UTF-8", "ru_RU.UTF-8")


@pytest.fixture
def sterile_settings():
    return make_settings(home="/root", path="/usr/sbin:/usr/bin:/bin", term="xterm-256color")


@pytest.fixture
def contaminated_environ():
    """Caller environment of an interactive login shell."""
    return {
        "HOME": "/home/operator",
        "PATH": "/home/operator/bin:/usr/local/bin:/usr/bin:/bin",
        "TERM": "screen",
        "LANG": "de_DE.UTF-8",
        "LC_ALL": "de_DE.UTF-8",
        "BASH_ENV": "/home/operator/.bashrc",
        "PS1": "\\u@\\h$ ",
        "PS4": "+ ",
        "PROMPT_COMMAND": "history -a",
        "AWS_SECRET_ACCESS_KEY": "do-not-leak",
    }


class FakeTty(io.StringIO):
    def __init__(self, tty: bool):
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


@pytest.fixture
def tty_stdin():
    return FakeTty(True)


@pytest.fixture
def pipe_stdin():
    return FakeTty(False)


@pytest.fixture
def recording_execve():
    """execve stand-in that records calls and simulates the new process.

    The replacement process starts with exactly the environment passed to
    execve, so the recorder copies it into the shared ``environ`` dict.
    """

    class Recorder:
        def __init__(self):
            self.calls = []
            self.environ = {}

        def __call__(self, program, argv, env):
            self.calls.append((program, list(argv), dict(env)))
            self.environ.clear()
            self.environ.update(env)

    return Recorder()
