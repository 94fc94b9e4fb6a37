"""Host locale catalog detection.

Queries the host once for its installed locales. Any failure to query is
treated as "nothing confirmed installed" so callers fall through to the
universal fallback instead of aborting.
"""

import os
import subprocess
import threading
from typing import List, Optional, Sequence, Tuple

import structlog
from infrastructure.locales.models import InstalledLocaleSet

logger = structlog.get_logger().bind(component="locales.catalog")

DEFAULT_QUERY_COMMAND = ("locale", "-a")
DEFAULT_QUERY_TIMEOUT_SECONDS = 5.0


def _decode_lines(output: bytes) -> Tuple[List[str], int]:
    """Decode one identifier per line, skipping lines that are not UTF-8."""
    lines = []
    skipped = 0
    for raw in output.splitlines():
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            skipped += 1
    return lines, skipped


def detect_installed(
    query_command: Sequence[str] = DEFAULT_QUERY_COMMAND,
    timeout: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
) -> InstalledLocaleSet:
    """Query the host's locale catalog.

    The query runs under the C locale so its own diagnostics cannot vary.
    A missing tool, an OS error, a non-zero exit or a hang past ``timeout``
    all yield an empty set. Output from a query that failed part way is
    discarded rather than trusted. A successful query keeps every entry
    that decodes as UTF-8; hosts with legacy locales list names such as
    Latin-1 encoded "bokmål", and only those entries are skipped.

    Args:
        query_command: Command printing one locale identifier per line.
        timeout: Seconds to wait before abandoning the query.

    Returns:
        InstalledLocaleSet, empty when the catalog could not be read.
    """
    log = logger.bind(command=" ".join(query_command))
    try:
        result = subprocess.run(
            list(query_command),
            capture_output=True,
            timeout=timeout,
            env={"LC_ALL": "C", "PATH": os.environ.get("PATH", os.defpath)},
            check=False,
        )
    except subprocess.TimeoutExpired:
        log.warning("locale_query_failed", reason="timeout", timeout=timeout)
        return InstalledLocaleSet.empty()
    except OSError as e:
        log.warning("locale_query_failed", reason="launch_error", error=str(e))
        return InstalledLocaleSet.empty()

    if result.returncode != 0:
        log.warning(
            "locale_query_failed",
            reason="nonzero_exit",
            returncode=result.returncode,
            stderr=result.stderr.decode("utf-8", errors="replace").strip(),
        )
        return InstalledLocaleSet.empty()

    lines, skipped = _decode_lines(result.stdout)
    if skipped:
        log.info("locale_entries_skipped", reason="undecodable", count=skipped)

    installed = InstalledLocaleSet.from_lines("\n".join(lines))
    log.info("locale_catalog_detected", locale_count=len(installed))
    return installed


class LocaleCatalog:
    """Process-wide holder of the installed locale set.

    The catalog is queried at most once; afterwards the cached set is
    returned to every caller without locking, since it is never mutated.

    Attributes:
        query_command: Command used for the single query.
        timeout: Query timeout in seconds.
    """

    def __init__(
        self,
        query_command: Sequence[str] = DEFAULT_QUERY_COMMAND,
        timeout: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
    ):
        self.query_command = tuple(query_command)
        self.timeout = timeout
        self._installed: Optional[InstalledLocaleSet] = None
        self._lock = threading.Lock()

    def get_installed(self) -> InstalledLocaleSet:
        """Return the installed set, querying the host on first use."""
        installed = self._installed
        if installed is not None:
            return installed

        with self._lock:
            if self._installed is None:
                self._installed = detect_installed(self.query_command, self.timeout)
            return self._installed


_catalog: Optional[LocaleCatalog] = None
_catalog_lock = threading.Lock()


def get_installed_locales(
    query_command: Sequence[str] = DEFAULT_QUERY_COMMAND,
    timeout: float = DEFAULT_QUERY_TIMEOUT_SECONDS,
) -> InstalledLocaleSet:
    """Return this process's installed locale set.

    The first call fixes the query command and timeout for the rest of
    the process lifetime; later arguments are ignored.
    """
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = LocaleCatalog(query_command, timeout)
    return _catalog.get_installed()


def reset_installed_locales() -> None:
    """Forget the cached catalog. Intended for tests only."""
    global _catalog
    with _catalog_lock:
        _catalog = None
