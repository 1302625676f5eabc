"""Runtime configuration — env-driven via pydantic-settings.

Reads ``MYGIT_*`` environment variables and an optional ``.env`` file.
The commit author falls back from ``MYGIT_AUTHOR`` to the ambient ``USER``
identity and finally to a fixed default.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTHOR = "MYGIT USER"


class MygitSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export MYGIT_AUTHOR="Ada Lovelace"
        export MYGIT_LOG_LEVEL=DEBUG
        export MYGIT_DEFAULT_BRANCH=main
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MYGIT_",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    author: str = Field(
        DEFAULT_AUTHOR,
        validation_alias=AliasChoices("MYGIT_AUTHOR", "USER"),
    )
    log_level: str = "WARNING"

    # Repository layout and defaults
    metadata_dir: str = ".mygit"
    ignore_file: str = ".mygitignore"
    default_branch: str = "master"
    default_message: str = "new commit"


# Module-level singleton; import as `from mygit.config import settings`
settings = MygitSettings()
