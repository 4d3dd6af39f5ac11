# coding: utf-8
import logging
from typing import Optional, Text

from .defaults import SystemDefaults
from .engine import (
    BabelEngine,
    FormatterHandle,
    FormattingEngine,
    Instant,
    Style,
)
from .errors import EngineError, FormatError, InvalidTimezoneError
from .timezones import KNOWN_KINDS, TimezoneHandle, timezones_equal

logger = logging.getLogger('horae.local_time')

# Locales that get a 12-hour clock. This list is far from complete.
AM_PM_LOCALES = {'en_US', 'en_US.UTF-8'}

# Named fields, as understood by `LocalTime.get_field()`
FIELDS = (
    'full_day',
    'week_of_year',
    'numeric_week_of_year',
    'day_in_month',
    'numeric_day_in_month',
    'weekday_name',
    'short_weekday_name',
    'month_name',
    'short_month_name',
    'year',
    'short_year',
    'time',
    'short_time',
)


class LocalTime(object):
    """
    Formats instants according to a locale and a timezone.

    Both the locale and the timezone default to the system's ones, resolved
    the first time they are needed. The underlying formatters are created
    lazily and thrown away as soon as the locale or the timezone change.

    This object is not thread-safe: use one instance per thread or lock it.

    >>> from horae import NamedZone
    >>> lt = LocalTime()
    >>> lt.set_locale('de_DE')
    >>> lt.set_timezone(NamedZone('Europe/Berlin'))
    >>> lt.get_month_name(1632253812)
    'September'
    """

    def __init__(self,
                 engine: Optional[FormattingEngine] = None,
                 defaults: Optional[SystemDefaults] = None):
        self.engine = engine or BabelEngine()
        self.defaults = defaults or SystemDefaults()
        self.locale = None  # type: Optional[Text]
        self.timezone = None  # type: Optional[TimezoneHandle]
        self._formatter = None  # type: Optional[FormatterHandle]
        self._day_formatter = None  # type: Optional[FormatterHandle]

    def set_locale(self, locale: Text) -> None:
        """
        Change the locale. Formatters are reset only if it actually changed.
        """

        if self.locale != locale:
            self.locale = locale
            self.reset()

    def set_timezone(self, timezone: TimezoneHandle) -> None:
        """
        Change the timezone. Formatters are reset only if it actually changed.

        :param timezone: a `NamedZone` or an `EngineZone`. Once a timezone is
                         set, it can only be replaced by one of the same kind.
        :raise InvalidTimezoneError: on unknown representations or kind
                                     mismatch
        """

        if not isinstance(timezone, KNOWN_KINDS):
            raise InvalidTimezoneError(
                'Valid timezone expected, got {}'.format(
                    type(timezone).__name__,
                )
            )

        if self.timezone is not None \
                and timezones_equal(self.timezone, timezone):
            return

        self.timezone = timezone
        self.reset()

    def format(self, time: Instant, pattern: Text) -> Text:
        """
        Format the instant with a pattern. For available symbols please see:
        https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table

        :param time: UNIX timestamp, date, datetime or ISO 8601 string
        :param pattern: date/time pattern, like "EEEE d MMMM"
        :raise FormatError: if the engine fails
        """

        try:
            return self.get_formatter(pattern).format(time)
        except EngineError as e:
            raise FormatError(
                'Failed to format {} as "{}": {} ({})'.format(
                    time,
                    pattern,
                    e.message,
                    e.code,
                ),
                e.message,
                e.code,
            ) from e

    def get_full_day(self, time: Instant) -> Text:
        """
        e.g. Tuesday, September 21, 2021
        """

        try:
            return self.get_day_formatter().format(time)
        except EngineError as e:
            raise FormatError(
                'Failed to format {} as full day: {} ({})'.format(
                    time,
                    e.message,
                    e.code,
                ),
                e.message,
                e.code,
            ) from e

    def get_week_of_year(self, time: Instant) -> Text:
        """
        e.g. 08
        """
        return self.format(time, 'ww')

    def get_numeric_week_of_year(self, time: Instant) -> int:
        return int(self.format(time, 'w'))

    def get_day_in_month(self, time: Instant) -> Text:
        """
        e.g. 03
        """
        return self.format(time, 'dd')

    def get_numeric_day_in_month(self, time: Instant) -> int:
        return int(self.format(time, 'd'))

    def get_weekday_name(self, time: Instant) -> Text:
        """
        e.g. Tuesday
        """
        return self.format(time, 'cccc')

    def get_short_weekday_name(self, time: Instant) -> Text:
        """
        e.g. Tue
        """
        return self.format(time, 'ccc')

    def get_month_name(self, time: Instant) -> Text:
        """
        e.g. September
        """
        return self.format(time, 'LLLL')

    def get_short_month_name(self, time: Instant) -> Text:
        """
        e.g. Sep
        """
        return self.format(time, 'LLL')

    def get_year(self, time: Instant) -> Text:
        """
        e.g. 2021
        """
        return self.format(time, 'y')

    def get_short_year(self, time: Instant) -> Text:
        """
        e.g. 21
        """
        return self.format(time, 'yy')

    def get_time(self, time: Instant) -> Text:
        """
        e.g. 21:50:12, or 9:50:12 PM for locales that want it
        """

        if self.wants_am_pm():
            return self.format(time, 'h:mm:ss a')

        return self.format(time, 'H:mm:ss')

    def get_short_time(self, time: Instant) -> Text:
        """
        e.g. 21:50, or 9:50 PM for locales that want it
        """

        if self.wants_am_pm():
            return self.format(time, 'h:mm a')

        return self.format(time, 'H:mm')

    def get_field(self, name: Text, time: Instant):
        """
        Get one of the named `FIELDS`, by name.

        :raise KeyError: if the field doesn't exist
        """

        if name not in FIELDS:
            raise KeyError('Unknown field "{}"'.format(name))

        return getattr(self, 'get_{}'.format(name))(time)

    def wants_am_pm(self) -> bool:
        # TODO: complete AM_PM_LOCALES with other locales using a 12h clock
        return self.get_locale() in AM_PM_LOCALES

    def is_us_english(self) -> bool:
        return self.get_locale() in AM_PM_LOCALES

    def get_formatter(self, pattern: Text) -> FormatterHandle:
        """
        Get the general-purpose formatter, configured with the current
        timezone and the given pattern.
        """

        if self._formatter is None:
            self._formatter = self.engine.create_formatter(
                self.get_locale(),
                Style.GREGORIAN,
                Style.GREGORIAN,
            )

        self._formatter.set_timezone(self.get_timezone())
        self._formatter.set_pattern(pattern)

        return self._formatter

    def get_day_formatter(self) -> FormatterHandle:
        """
        Get the formatter that renders full dates, configured with the current
        timezone.
        """

        if self._day_formatter is None:
            self._day_formatter = self.engine.create_formatter(
                self.get_locale(),
                Style.FULL,
                Style.NONE,
            )

        self._day_formatter.set_timezone(self.get_timezone())

        return self._day_formatter

    def get_locale(self) -> Text:
        """
        Current locale. If none was set, the default one is resolved and
        kept.
        """

        if self.locale is None:
            self.locale = self.defaults.default_locale()
            logger.debug('Using default locale "%s"', self.locale)

        return self.locale

    def get_timezone(self) -> TimezoneHandle:
        """
        Current timezone. If none was set, the default one is resolved and
        kept.
        """

        if self.timezone is None:
            self.timezone = self.defaults.default_timezone()
            logger.debug('Using default timezone "%s"', self.timezone)

        return self.timezone

    def reset(self) -> None:
        """
        Forget the formatters, they will be created again when needed.
        """

        if self._formatter is not None or self._day_formatter is not None:
            logger.debug('Resetting formatters')

        self._formatter = None
        self._day_formatter = None
