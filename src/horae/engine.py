# coding: utf-8
"""
Formatting engine.

The facade in `horae.local_time` never formats anything itself: it asks an
engine for formatter handles, configures them with a timezone and a pattern
and lets them render instants. This module defines that contract and its
Babel implementation.

Patterns follow the Unicode date field symbol table, see
https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table
"""
import logging
from datetime import date, datetime, time, timezone, tzinfo
from enum import Enum
from typing import Optional, Text, Union

from babel import Locale, UnknownLocaleError
from babel import dates
from dateutil.parser import parse as parse_date

from .errors import (
    ILLEGAL_ARGUMENT_ERROR,
    INVALID_FORMAT_ERROR,
    MISSING_RESOURCE_ERROR,
    EngineError,
)
from .locales import normalize_locale
from .timezones import TimezoneHandle

logger = logging.getLogger('horae.engine')

Instant = Union[int, float, date, datetime, Text]


class Style(Enum):
    """
    Predefined date/time styles a formatter can be created with.
    `GREGORIAN` is the pattern-driven style: it renders as `MEDIUM` until a
    pattern is set.
    """

    FULL = 'full'
    LONG = 'long'
    MEDIUM = 'medium'
    SHORT = 'short'
    NONE = 'none'
    GREGORIAN = 'gregorian'

    @property
    def babel_format(self) -> Optional[Text]:
        if self is Style.NONE:
            return None
        elif self is Style.GREGORIAN:
            return Style.MEDIUM.value
        return self.value


def make_datetime(obj: Instant) -> datetime:
    """
    A flexible method to get an aware datetime out of an instant.

    It accepts a UNIX timestamp (int or float, in seconds), a `datetime`
    (naive ones are considered UTC), a `date` (midnight UTC) or an ISO 8601
    string.

    :raise EngineError: when the instant can't be understood or is out of
                        range
    """

    try:
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj
        elif isinstance(obj, date):
            return datetime.combine(obj, time(), tzinfo=timezone.utc)
        elif isinstance(obj, (int, float)) and not isinstance(obj, bool):
            return datetime.fromtimestamp(obj, timezone.utc)
        elif isinstance(obj, str):
            return make_datetime(parse_date(obj))
    except (OverflowError, OSError, ValueError) as e:
        raise EngineError(
            'Instant {!r} is out of range or invalid: {}'.format(obj, e),
            ILLEGAL_ARGUMENT_ERROR,
        ) from e

    raise EngineError(
        'Unsupported instant type {}'.format(type(obj).__name__),
        ILLEGAL_ARGUMENT_ERROR,
    )


def _localize(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        return dt

    dt = dt.astimezone(tz)

    if hasattr(tz, 'normalize'):  # pytz
        dt = tz.normalize(dt)

    return dt


class FormatterHandle(object):
    """
    A stateful formatter, bound to a locale and to styles. Timezone and
    pattern can be changed between calls to `format()`.
    """

    def set_timezone(self, tz: TimezoneHandle) -> None:
        raise NotImplementedError

    def set_pattern(self, pattern: Optional[Text]) -> None:
        raise NotImplementedError

    def format(self, instant: Instant) -> Text:
        """
        Render the instant.

        :raise EngineError: if rendering fails
        """
        raise NotImplementedError


class FormattingEngine(object):
    """
    Creates formatter handles
    """

    def create_formatter(self,
                         locale: Text,
                         date_style: Style,
                         time_style: Style) -> FormatterHandle:
        """
        :raise EngineError: if the locale is unknown
        """
        raise NotImplementedError


class BabelFormatter(FormatterHandle):
    """
    Babel-backed formatter. When a pattern is set it wins over the styles,
    otherwise the date/time styles define the output.
    """

    def __init__(self, locale: Locale, date_style: Style, time_style: Style):
        self.locale = locale
        self.date_style = date_style
        self.time_style = time_style
        self.tzinfo = None  # type: Optional[tzinfo]
        self.pattern = None  # type: Optional[Text]

    def set_timezone(self, tz: TimezoneHandle) -> None:
        self.tzinfo = tz.tzinfo

    def set_pattern(self, pattern: Optional[Text]) -> None:
        self.pattern = pattern

    def format(self, instant: Instant) -> Text:
        dt = make_datetime(instant)

        try:
            if self.pattern is not None:
                return dates.format_datetime(
                    dt,
                    self.pattern,
                    tzinfo=self.tzinfo,
                    locale=self.locale,
                )

            return self._format_styles(_localize(dt, self.tzinfo))
        except (KeyError, ValueError) as e:
            message = e.args[0] if e.args else repr(e)
            raise EngineError(str(message), INVALID_FORMAT_ERROR) from e
        except OverflowError as e:
            raise EngineError(str(e), ILLEGAL_ARGUMENT_ERROR) from e

    def _format_styles(self, dt: datetime) -> Text:
        date_format = self.date_style.babel_format
        time_format = self.time_style.babel_format

        if date_format is None and time_format is None:
            raise EngineError(
                'Formatter has neither date nor time style',
                ILLEGAL_ARGUMENT_ERROR,
            )
        elif time_format is None:
            return dates.format_date(dt, date_format, locale=self.locale)
        elif date_format is None:
            return dates.format_time(dt, time_format, locale=self.locale)

        return (
            dates.get_datetime_format(date_format, locale=self.locale)
            .replace("'", "")
            .replace('{0}', dates.format_time(dt, time_format,
                                              locale=self.locale))
            .replace('{1}', dates.format_date(dt, date_format,
                                              locale=self.locale))
        )


class BabelEngine(FormattingEngine):
    """
    Formatting engine relying on Babel and its CLDR data
    """

    def create_formatter(self,
                         locale: Text,
                         date_style: Style,
                         time_style: Style) -> BabelFormatter:
        try:
            babel_locale = Locale.parse(normalize_locale(locale))
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise EngineError(
                'Unknown locale "{}"'.format(locale),
                MISSING_RESOURCE_ERROR,
            ) from e

        logger.debug(
            'Created formatter for "%s" (date: %s, time: %s)',
            babel_locale,
            date_style.name,
            time_style.name,
        )

        return BabelFormatter(babel_locale, date_style, time_style)
