"""Candidate profile loading interface and implementations.

A profile overrides the built-in candidate chains, e.g. for hosts whose
operators read timestamps in a different regional format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

import structlog
from infrastructure.locales.models import LocaleCandidates

logger = structlog.get_logger()

PROFILE_KEYS = ("message", "time")


@dataclass(frozen=True)
class CandidateProfile:
    """Candidate chains read from a profile.

    Attributes:
        message: Message chain, or None to keep the built-in one.
        time: Time chain, or None to derive it from the message chain.
    """

    message: Optional[LocaleCandidates] = None
    time: Optional[LocaleCandidates] = None


class CandidateProfileLoader(ABC):
    """Abstract base for candidate profile loaders."""

    @abstractmethod
    def load(self) -> CandidateProfile:
        """Load the candidate profile.

        Returns:
            CandidateProfile with the configured chains.

        Raises:
            FileNotFoundError: If the profile source does not exist.
            ValueError: If the profile format is invalid.
        """
        pass


class YAMLCandidateProfileLoader(CandidateProfileLoader):
    """Loader for YAML candidate profiles.

    Expected format:
        message:
          - en_US.UTF-8
          - C.UTF-8
        time:
          - de_DE.UTF-8

    Both keys are optional. Each list gets the C locale appended when it
    does not already end in C.

    Attributes:
        profile_path: Path to the YAML file.
    """

    def __init__(self, profile_path: Path):
        self.profile_path = Path(profile_path)

    def load(self) -> CandidateProfile:
        if not self.profile_path.exists():
            raise FileNotFoundError(
                f"Locale candidate profile not found: {self.profile_path}"
            )

        try:
            with open(self.profile_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(
                "yaml_parse_error", file=str(self.profile_path), error=str(e)
            )
            raise ValueError(f"Failed to parse {self.profile_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Locale candidate profile must be a mapping: {self.profile_path}"
            )

        unknown = sorted(set(data) - set(PROFILE_KEYS))
        if unknown:
            logger.warning(
                "unknown_profile_keys", file=str(self.profile_path), keys=unknown
            )

        profile = CandidateProfile(
            message=self._candidates(data, "message"),
            time=self._candidates(data, "time"),
        )
        logger.info(
            "loaded_candidate_profile",
            file=str(self.profile_path),
            has_message=profile.message is not None,
            has_time=profile.time is not None,
        )
        return profile

    def _candidates(
        self, data: Dict[str, Any], purpose: str
    ) -> Optional[LocaleCandidates]:
        entries = data.get(purpose)
        if entries is None:
            return None
        if not isinstance(entries, list) or not all(
            isinstance(entry, str) for entry in entries
        ):
            raise ValueError(
                f"'{purpose}' in {self.profile_path} must be a list of locale names"
            )
        return LocaleCandidates.from_preferences(purpose, entries)
