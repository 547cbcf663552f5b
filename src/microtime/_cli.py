"""Command-line front-end (Typer-based).

Provides :func:`build_cli`, which constructs a Typer app with global
options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``) and three commands:

``now``
    Print the current time, optionally shifted by ``--offset``
    seconds, optionally followed by its local calendar fields.
``duration``
    Render a seconds/microseconds pair as ``[Nd ]HH:MM:SS``.
``elapsed``
    Render the difference between two ``<seconds>[.<micros>]`` values.

The module-level :data:`app` is the console-script entry point.
"""

from __future__ import annotations

import logging
import re
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from microtime import __version__
from microtime._clock import ClockPort, LocalTimePort
from microtime._duration import DurationView
from microtime._errors import MicrotimeError
from microtime._logging import configure_logging
from microtime._settings import LoggingSettings, Settings
from microtime._timepoint import TimePoint

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)

# Lets "-5" reach positional arguments instead of failing as an unknown option.
_SIGNED_ARGS = {"ignore_unknown_options": True}

_TIMEPOINT_RE = re.compile(r"^(?P<sign>-?)(?P<seconds>\d+)(?:\.(?P<frac>\d{1,6}))?s?$")


def parse_timepoint(text: str) -> TimePoint:
    """Parse ``<seconds>[.<fraction>][s]`` into a :class:`TimePoint`.

    Accepts the output of ``str(TimePoint)`` as well as shorter
    fractions (``"1.5"`` is one and a half seconds).

    Raises:
        typer.BadParameter: *text* is not in the expected form.
    """
    match = _TIMEPOINT_RE.match(text.strip())
    if match is None:
        raise typer.BadParameter(
            f"Invalid time value '{text}'. Expected <seconds>[.<micros>]."
        )
    frac = (match["frac"] or "").ljust(6, "0")
    magnitude = TimePoint(int(match["seconds"]), int(frac))
    if match["sign"]:
        return TimePoint() - magnitude
    return magnitude


def build_cli(
    *,
    clock: ClockPort | None = None,
    localtime: LocalTimePort | None = None,
    settings_class: type[Settings] = Settings,
) -> typer.Typer:
    """Construct the ``microtime`` Typer CLI.

    Args:
        clock: Clock used by ``now``.  Defaults to the system clock.
        localtime: Converter used by ``now --fields``.  Defaults to
            the host's local time.
        settings_class: Settings model to load.  Tests pass an
            isolated subclass that ignores the environment.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    cli = typer.Typer(
        help=f"microtime v{__version__} — microsecond time arithmetic and formatting",
    )

    # -- global options ------------------------------------------------------

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        if version_flag:
            typer.echo(f"microtime v{__version__}")
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        try:
            settings = settings_class(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(settings.logging, service="microtime", version=__version__)
        ctx.obj = settings

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    # -- commands ------------------------------------------------------------

    @cli.command()
    def now(
        offset: Annotated[
            int,
            typer.Option(
                "--offset",
                help="Whole seconds to add (positive) or subtract (negative).",
            ),
        ] = 0,
        fields: Annotated[
            bool,
            typer.Option("--fields", help="Also print local calendar fields."),
        ] = False,
    ) -> None:
        """Print the current time as <seconds>.<micros>s."""
        if offset >= 0:
            current = TimePoint.future(offset, clock)
        else:
            current = TimePoint.past(-offset, clock)
        typer.echo(str(current))

        if fields:
            try:
                cal = current.localtime(localtime)
            except MicrotimeError as exc:
                logger.error("Runtime error: %s", exc)
                raise SystemExit(EXIT_RUNTIME_ERROR) from exc
            typer.echo(
                f"year={cal.year} month={cal.month} day={cal.day} "
                f"hour={cal.hour} minute={cal.minute} second={cal.second}"
            )

    @cli.command(context_settings=_SIGNED_ARGS)
    def duration(
        ctx: typer.Context,
        seconds: Annotated[int, typer.Argument(help="Whole seconds.")],
        micros: Annotated[
            int,
            typer.Option("--micros", min=0, max=999_999, help="Sub-second microseconds."),
        ] = 0,
        show_micros: Annotated[
            bool | None,
            typer.Option(
                "--show-micros/--hide-micros",
                help="Append .uuuuuu (default from settings).",
            ),
        ] = None,
    ) -> None:
        """Render SECONDS as [Nd ]HH:MM:SS."""
        show = _resolve_show_micros(ctx, show_micros)
        typer.echo(str(DurationView(seconds, micros, show)))

    @cli.command(context_settings=_SIGNED_ARGS)
    def elapsed(
        ctx: typer.Context,
        start: Annotated[str, typer.Argument(help="Start as <seconds>[.<micros>].")],
        end: Annotated[str, typer.Argument(help="End as <seconds>[.<micros>].")],
        show_micros: Annotated[
            bool | None,
            typer.Option(
                "--show-micros/--hide-micros",
                help="Append .uuuuuu (default from settings).",
            ),
        ] = None,
    ) -> None:
        """Render END - START as [Nd ]HH:MM:SS."""
        delta = parse_timepoint(end) - parse_timepoint(start)
        logger.debug("Elapsed between %s and %s: %s", start, end, delta)
        show = _resolve_show_micros(ctx, show_micros)
        typer.echo(str(DurationView.of(delta, show)))

    return cli


def _resolve_show_micros(ctx: typer.Context, flag: bool | None) -> bool:
    if flag is not None:
        return flag
    settings: Settings = ctx.find_root().obj
    return settings.display.show_micros


app = build_cli()
