# coding: utf-8
import logging
from typing import Text, Union

from babel import default_locale
from babel.localtime import get_localzone

from .conf import settings
from .errors import InvalidTimezoneError
from .timezones import TimezoneHandle, make_timezone

logger = logging.getLogger('horae.defaults')


class SystemDefaults(object):
    """
    Tells which locale and timezone to use when a formatter wasn't given any.

    Settings win (`DEFAULT_LOCALE`, `DEFAULT_TIMEZONE`), then comes what the
    system says (LC_TIME environment variables, local timezone) and finally
    the `FALLBACK_*` settings.
    """

    def default_locale(self) -> Text:
        if settings.DEFAULT_LOCALE:
            return settings.DEFAULT_LOCALE

        return default_locale('LC_TIME') or settings.FALLBACK_LOCALE

    def default_timezone(self) -> TimezoneHandle:
        if settings.DEFAULT_TIMEZONE:
            return make_timezone(settings.DEFAULT_TIMEZONE)

        try:
            return make_timezone(get_localzone())
        except (LookupError, InvalidTimezoneError):
            logger.debug(
                'No usable local timezone, falling back to "%s"',
                settings.FALLBACK_TIMEZONE,
            )
            return make_timezone(settings.FALLBACK_TIMEZONE)


class FixedDefaults(SystemDefaults):
    """
    Always the same defaults, whatever the system says. Useful to get
    reproducible outputs, typically in tests.
    """

    def __init__(self,
                 locale: Text,
                 timezone: Union[TimezoneHandle, Text] = 'UTC'):
        self.locale = locale
        self.timezone = make_timezone(timezone)

    def default_locale(self) -> Text:
        return self.locale

    def default_timezone(self) -> TimezoneHandle:
        return self.timezone
