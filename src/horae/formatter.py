# coding: utf-8
import string
from typing import Any, Text

from .local_time import LocalTime


class LocalTimeStringFormatter(string.Formatter):
    """
    That is a string formatter that formats instants through a `LocalTime`,
    hence according to its locale and timezone.

    Available:

        - `time:PATTERN`: format the instant with a date/time pattern, like
          `{0:time:EEEE d MMMM}`
        - `field:NAME`: one of the named fields of `LocalTime`, like
          `{0:field:short_time}`

    >>> fmt = LocalTimeStringFormatter(local_time)
    >>> fmt.format('{when:field:weekday_name} at {when:field:short_time}',
    ...            when=1632253812)
    'Tuesday at 9:50 PM'
    """

    def __init__(self, local_time: LocalTime):
        self.local_time = local_time

    def format_field(self, value: Any, spec: Text) -> Text:
        """
        Provide the additional formatters for localized instants.
        """

        if spec.startswith('time:'):
            _, pattern = spec.split(':', 1)
            return self.local_time.format(value, pattern)
        elif spec.startswith('field:'):
            _, name = spec.split(':', 1)
            return str(self.local_time.get_field(name, value))
        else:
            return super(LocalTimeStringFormatter, self)\
                .format_field(value, spec)
