"""Sterile process environment settings."""

from typing import List

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class SterileSettings(InfrastructureSettings):
    """Fixed values injected into every sterile environment.

    Environment Variables:
        STERILE_HOME: HOME for sterile processes (default: /root)
        STERILE_PATH: PATH for sterile processes (default: /usr/sbin:/usr/bin:/bin)
        STERILE_TERM: TERM for sterile processes (default: xterm-256color)
        STERILE_PRESERVE: JSON list of variable names copied from the caller
            when present, e.g. ["PS4"] (default: [])
        STERILE_ONLY_IF_CONTAMINATED: Re-exec only interactive processes or
            processes with BASH_ENV/ENV set (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        path = settings.sterile.path
        ```
    """

    home: str = Field(default="/root", alias="STERILE_HOME")
    path: str = Field(default="/usr/sbin:/usr/bin:/bin", alias="STERILE_PATH")
    term: str = Field(default="xterm-256color", alias="STERILE_TERM")
    preserve: List[str] = Field(
        default_factory=list,
        alias="STERILE_PRESERVE",
        description="Caller variables carried into the sterile environment",
    )
    only_if_contaminated: bool = Field(
        default=False,
        alias="STERILE_ONLY_IF_CONTAMINATED",
        description="Skip self re-exec for non-interactive, rc-free processes",
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("STERILE_PATH must not be empty")
        return v
