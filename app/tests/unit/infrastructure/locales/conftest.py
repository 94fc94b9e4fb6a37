"""Feature-level fixtures for locale resolution tests."""

import os
import stat

import pytest
import yaml


@pytest.fixture
def preferred_candidates():
    """Message candidates used throughout the resolution scenarios."""
    return ["en_US.UTF-8", "ru_RU.UTF-8", "C.UTF-8", "C"]


@pytest.fixture
def glibc_installed_lines():
    """`locale -a` output as printed by a typical glibc host."""
    return "C\nC.utf8\nPOSIX\nen_US.utf8\n"


@pytest.fixture
def fake_query(tmp_path):
    """Build an executable that mimics `locale -a`.

    Returns a function taking the script body (shell) and returning the
    command list to pass as query_command.
    """

    def _make(body: str, name: str = "fake-locale"):
        script = tmp_path / name
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return [str(script)]

    return _make


@pytest.fixture
def profile_file(tmp_path):
    """Write a YAML candidate profile and return its path."""

    def _write(data, name: str = "profile.yml"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                yaml.dump(data, f)
        return path

    return _write


@pytest.fixture
def no_sterile_marker(monkeypatch):
    monkeypatch.delenv("_STERILE", raising=False)
    return os.environ
