"""Root-level conftest.py for integration tests.

Integration tests launch real processes on the host. They use the host's
own binaries (sh, env, date, locale) and skip when one is missing.
"""

import shutil

import pytest


@pytest.fixture
def require_binary():
    """Skip the test unless every named program is on PATH."""

    def _require(*names):
        missing = [name for name in names if shutil.which(name) is None]
        if missing:
            pytest.skip(f"missing host binaries: {', '.join(missing)}")

    return _require
