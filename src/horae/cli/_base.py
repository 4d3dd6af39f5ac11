# coding: utf-8
import logging
from typing import Optional

import typer

from horae.errors import LocalTimeError
from horae.local_time import FIELDS, LocalTime
from horae.timezones import make_timezone

logger = logging.getLogger('horae.cli')

app = typer.Typer(help='Format instants according to a locale and timezone.')


def init_logger(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )


def parse_time(value: str):
    """
    Timestamps are given as numbers, anything else is handed as-is to the
    formatter (which understands ISO 8601).
    """

    for kind in (int, float):
        try:
            return kind(value)
        except ValueError:
            continue

    return value


@app.command()
def format_time(
    time: str = typer.Argument(
        ...,
        help='UNIX timestamp or ISO 8601 date/time',
    ),
    pattern: Optional[str] = typer.Argument(
        None,
        help='Date/time pattern, like "EEEE d MMMM"',
    ),
    locale: Optional[str] = typer.Option(
        None,
        '--locale',
        '-l',
        help='Locale to use, defaults to the system one',
    ),
    timezone: Optional[str] = typer.Option(
        None,
        '--timezone',
        '-t',
        help='IANA timezone to use, defaults to the system one',
    ),
    field: Optional[str] = typer.Option(
        None,
        '--field',
        '-f',
        help='Named field to output instead of a pattern ({})'.format(
            ', '.join(FIELDS),
        ),
    ),
    debug: bool = typer.Option(False, '--debug', help='Verbose logging'),
) -> None:
    """
    Print TIME formatted with PATTERN, or the full day if neither a pattern
    nor a field is given.
    """

    from horae.conf import settings

    init_logger(debug or settings.DEBUG)

    if pattern is not None and field is not None:
        raise typer.BadParameter('Give either a pattern or a field, not both')

    local_time = LocalTime()
    instant = parse_time(time)

    try:
        if locale:
            local_time.set_locale(locale)

        if timezone:
            local_time.set_timezone(make_timezone(timezone))

        if pattern is not None:
            output = local_time.format(instant, pattern)
        elif field is not None:
            output = local_time.get_field(field, instant)
        else:
            output = local_time.get_full_day(instant)
    except (LocalTimeError, KeyError) as e:
        logger.debug('Formatting failed', exc_info=True)
        typer.echo('Error: {}'.format(e), err=True)
        raise typer.Exit(code=1) from e

    typer.echo(output)


def main():
    app()
