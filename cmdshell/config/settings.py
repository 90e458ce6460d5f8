"""
Runtime configuration for the command shell.

Values come from defaults, then ``CMDSHELL_*`` environment variables, then
explicit overrides (the CLI passes its arguments through ``model_copy``).
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, PositiveInt, field_validator

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32

ENV_MAX_DEPTH = "CMDSHELL_MAX_DEPTH"
ENV_REPLY_SEPARATOR = "CMDSHELL_REPLY_SEPARATOR"
ENV_SUPPRESS_EMPTY = "CMDSHELL_SUPPRESS_EMPTY"
ENV_LOG_LEVEL = "CMDSHELL_LOG_LEVEL"

_FALSE_VALUES = {"0", "false", "no", "off"}
_NO_LIMIT_VALUES = {"", "0", "none", "off", "unlimited"}


class ShellConfig(BaseModel):
    """Settings shared by the parser, the dispatcher and the CLI."""
    max_depth: Optional[PositiveInt] = Field(
        DEFAULT_MAX_DEPTH,
        description="Maximum interpolation / nested shell depth. None disables the limit.",
    )
    reply_separator: str = Field(" ", description="Joins the replies of one command into a single string.")
    suppress_empty_replies: bool = Field(True, description="Do not reply when the final result is empty.")
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """
        Build a config from ``CMDSHELL_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (used by tests).

        Returns:
            A validated ShellConfig. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values = {}

        if ENV_MAX_DEPTH in env:
            raw = env[ENV_MAX_DEPTH].strip().lower()
            values["max_depth"] = None if raw in _NO_LIMIT_VALUES else int(raw)
        if ENV_REPLY_SEPARATOR in env:
            values["reply_separator"] = env[ENV_REPLY_SEPARATOR]
        if ENV_SUPPRESS_EMPTY in env:
            values["suppress_empty_replies"] = env[ENV_SUPPRESS_EMPTY].strip().lower() not in _FALSE_VALUES
        if ENV_LOG_LEVEL in env:
            values["log_level"] = env[ENV_LOG_LEVEL]

        logger.debug(f"ShellConfig from environment: {values}")
        return cls(**values)
