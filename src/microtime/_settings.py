"""Configuration via pydantic-settings.

Configuration is loaded from environment variables and/or ``.env``
files, all prefixed with ``MICROTIME_``.  Nested models use ``__`` as
the delimiter in env var names, e.g. ``MICROTIME_LOGGING__LEVEL=DEBUG``.

The library types (:class:`~microtime.TimePoint`,
:class:`~microtime.DurationView`) never read settings; only the CLI
does.  The schema covers:

* **Logging** — level, format, optional file sink, rotation.
* **Display** — default rendering options for CLI output.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings — nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"text"`` (default) — human-readable timestamped lines, the
      natural choice for a command-line tool.
    - ``"json"`` — one JSON object per line for log aggregators.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class DisplaySettings(BaseModel):
    """Rendering defaults for CLI output.

    Environment variables::

        MICROTIME_DISPLAY__SHOW_MICROS=true
    """

    show_micros: bool = Field(
        default=False,
        description="Append '.uuuuuu' to rendered durations by default.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for the ``microtime`` CLI.

    Example ``.env``::

        MICROTIME_LOGGING__LEVEL=DEBUG
        MICROTIME_LOGGING__FORMAT=json
        MICROTIME_DISPLAY__SHOW_MICROS=true
    """

    model_config = SettingsConfigDict(
        env_prefix="MICROTIME_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    display: DisplaySettings = Field(
        default_factory=DisplaySettings,
        description="Output rendering defaults.",
    )
