"""Tests for infrastructure.locales.catalog module."""

import subprocess
import threading
from unittest.mock import patch

import pytest

from infrastructure.locales import catalog, resolve_selection
from infrastructure.locales.catalog import (
    LocaleCatalog,
    detect_installed,
    get_installed_locales,
    reset_installed_locales,
)
from tests.factories.execution import make_completed_process


@pytest.mark.unit
class TestDetectInstalled:
    """Tests for detect_installed()."""

    def test_parses_one_locale_per_line(self, glibc_installed_lines):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(
                stdout=glibc_installed_lines.encode("ascii")
            ),
        ):
            installed = detect_installed()

        assert installed.names == frozenset({"C", "C.utf8", "POSIX", "en_US.utf8"})

    def test_runs_query_under_c_locale(self):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(stdout=b"C\n"),
        ) as mock_run:
            detect_installed(("locale", "-a"), timeout=2.5)

        args, kwargs = mock_run.call_args
        assert args[0] == ["locale", "-a"]
        assert kwargs["env"]["LC_ALL"] == "C"
        assert kwargs["timeout"] == 2.5

    def test_missing_tool_yields_empty_set(self):
        with patch.object(
            catalog.subprocess, "run", side_effect=FileNotFoundError("locale")
        ):
            installed = detect_installed()

        assert installed.is_empty

    def test_permission_error_yields_empty_set(self):
        with patch.object(
            catalog.subprocess, "run", side_effect=PermissionError("locale")
        ):
            assert detect_installed().is_empty

    def test_timeout_yields_empty_set(self):
        with patch.object(
            catalog.subprocess,
            "run",
            side_effect=subprocess.TimeoutExpired(cmd=["locale", "-a"], timeout=5),
        ):
            assert detect_installed().is_empty

    def test_partial_output_with_error_yields_empty_set(self):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(
                returncode=1, stdout=b"C\nPOSIX\n", stderr=b"locale: broken archive"
            ),
        ):
            assert detect_installed().is_empty

    def test_undecodable_entry_is_skipped(self):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(
                stdout=b"C\nen_US.utf8\nbokm\xe5l\nPOSIX\n"
            ),
        ):
            installed = detect_installed()

        assert installed.names == frozenset({"C", "en_US.utf8", "POSIX"})

    def test_utf8_entry_is_kept(self):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(stdout="C\nbokmål\n".encode("utf-8")),
        ):
            installed = detect_installed()

        assert "bokmål" in installed

    def test_only_undecodable_entries_yields_empty_set(self):
        with patch.object(
            catalog.subprocess,
            "run",
            return_value=make_completed_process(stdout=b"\xff\xfe\n"),
        ):
            assert detect_installed().is_empty

    def test_real_query_script(self, fake_query):
        command = fake_query("printf 'C\\nen_US.utf8\\nru_RU.utf8\\n'")
        installed = detect_installed(command)
        assert "ru_RU.UTF8" in installed
        assert len(installed) == 3

    def test_real_query_with_legacy_entry_keeps_english(self, fake_query):
        command = fake_query("printf 'C\\nC.utf8\\nen_US.utf8\\nbokm\\345l\\nPOSIX\\n'")
        selection = resolve_selection(detect_installed(command))
        assert selection.message_locale == "en_US.utf8"

    def test_real_failing_query_script(self, fake_query):
        command = fake_query("echo C; exit 3")
        assert detect_installed(command).is_empty

    def test_real_missing_query_program(self, tmp_path):
        assert detect_installed([str(tmp_path / "no-such-locale")]).is_empty


@pytest.mark.unit
class TestLocaleCatalog:
    """Tests for the process-wide catalog cache."""

    def test_queries_once(self):
        with patch.object(
            catalog, "detect_installed", return_value=catalog.InstalledLocaleSet.empty()
        ) as mock_detect:
            holder = LocaleCatalog(("locale", "-a"), 1.0)
            first = holder.get_installed()
            second = holder.get_installed()

        assert first is second
        mock_detect.assert_called_once_with(("locale", "-a"), 1.0)

    def test_caches_empty_result(self):
        with patch.object(
            catalog, "detect_installed", return_value=catalog.InstalledLocaleSet.empty()
        ) as mock_detect:
            holder = LocaleCatalog()
            holder.get_installed()
            holder.get_installed()

        assert mock_detect.call_count == 1

    def test_concurrent_first_use_queries_once(self):
        calls = []
        release = threading.Event()

        def slow_detect(command, timeout):
            calls.append(command)
            release.wait(timeout=2)
            return catalog.InstalledLocaleSet(frozenset({"C"}))

        holder = LocaleCatalog()
        results = []
        with patch.object(catalog, "detect_installed", side_effect=slow_detect):
            threads = [
                threading.Thread(target=lambda: results.append(holder.get_installed()))
                for _ in range(5)
            ]
            for thread in threads:
                thread.start()
            release.set()
            for thread in threads:
                thread.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 5
        assert all(result is results[0] for result in results)


@pytest.mark.unit
class TestGetInstalledLocales:
    """Tests for get_installed_locales() and reset_installed_locales()."""

    def test_process_cache_is_shared(self):
        with patch.object(
            catalog, "detect_installed", return_value=catalog.InstalledLocaleSet.empty()
        ) as mock_detect:
            get_installed_locales()
            get_installed_locales(("other", "command"))

        assert mock_detect.call_count == 1

    def test_reset_forces_new_query(self):
        with patch.object(
            catalog, "detect_installed", return_value=catalog.InstalledLocaleSet.empty()
        ) as mock_detect:
            get_installed_locales()
            reset_installed_locales()
            get_installed_locales()

        assert mock_detect.call_count == 2
