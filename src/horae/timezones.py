# coding: utf-8
"""
Timezone handles.

A formatter can be given two kinds of timezones: named zones, which are
plain IANA zones resolved through pytz, and engine zones, which are resolved
by the formatting engine itself (Babel) and identified by their canonical
CLDR name. Both kinds wrap a `tzinfo` that is handed to the engine.

Handles of the same kind are equal when their identifiers are equal.
Comparing handles of different kinds through `timezones_equal()` is a usage
error and raises `InvalidTimezoneError`.
"""
from datetime import tzinfo
from typing import Any, Text, Union

import pytz
from babel.core import get_global
from babel.dates import get_timezone

from .errors import InvalidTimezoneError


class TimezoneHandle(object):
    """
    Base of the timezone representations. Sub-classes implement `_resolve()`
    and `_canonical()`.
    """

    kind = None

    def __init__(self, name: Text):
        if not isinstance(name, str) or not name:
            raise InvalidTimezoneError(
                'Timezone name expected, got {!r}'.format(name)
            )

        self.tzinfo = self._resolve(name)  # type: tzinfo
        self.id = self._canonical(name)  # type: Text

    def _resolve(self, name: Text) -> tzinfo:
        raise NotImplementedError

    def _canonical(self, name: Text) -> Text:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, TimezoneHandle):
            return NotImplemented

        return self.kind == other.kind and self.id == other.id

    def __hash__(self):
        return hash((self.kind, self.id))

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.id)

    def __str__(self):
        return self.id


class NamedZone(TimezoneHandle):
    """
    An IANA timezone, looked up by name in pytz' database.
    """

    kind = 'named'

    def _resolve(self, name: Text) -> tzinfo:
        try:
            return pytz.timezone(name)
        except pytz.UnknownTimeZoneError:
            raise InvalidTimezoneError('Unknown timezone "{}"'.format(name))

    def _canonical(self, name: Text) -> Text:
        return self.tzinfo.zone


class EngineZone(TimezoneHandle):
    """
    A timezone as the engine knows it. Aliases are resolved to the canonical
    CLDR name, so "US/Eastern" and "America/New_York" are the same zone.
    """

    kind = 'engine'

    def _resolve(self, name: Text) -> tzinfo:
        try:
            return get_timezone(name)
        except LookupError:
            raise InvalidTimezoneError('Unknown timezone "{}"'.format(name))

    def _canonical(self, name: Text) -> Text:
        # the engine matches names without case, the resolved zone knows the
        # real spelling
        name = getattr(self.tzinfo, 'zone', None) \
            or getattr(self.tzinfo, 'key', name)
        return get_global('zone_aliases').get(name, name)


KNOWN_KINDS = (NamedZone, EngineZone)


def _describe(value: Any) -> Text:
    if isinstance(value, TimezoneHandle):
        return value.__class__.__name__

    return type(value).__name__


def timezones_equal(left: TimezoneHandle, right: TimezoneHandle) -> bool:
    """
    Structural equality of two timezone handles: same representation and same
    identifier.

    :raise InvalidTimezoneError: if either value is not a known representation
                                 or if representations differ
    """

    for kind in KNOWN_KINDS:
        if isinstance(left, kind):
            if isinstance(right, kind):
                return left.id == right.id

            raise InvalidTimezoneError(
                'Cannot compare a {} with a {}'.format(
                    _describe(left),
                    _describe(right),
                )
            )

    raise InvalidTimezoneError(
        'Valid timezone expected, got {}'.format(_describe(left))
    )


def make_timezone(value: Union[TimezoneHandle, tzinfo, Text]) -> TimezoneHandle:
    """
    A flexible method to get a timezone handle.

    It accepts either a handle (returned as-is), either an IANA name, either a
    pytz/zoneinfo `tzinfo` that knows its own name. The two latter become
    named zones.
    """

    if isinstance(value, KNOWN_KINDS):
        return value
    elif isinstance(value, str):
        return NamedZone(value)
    elif isinstance(value, tzinfo):
        # pytz zones have a `zone`, zoneinfo ones have a `key`
        name = getattr(value, 'zone', None) or getattr(value, 'key', None)

        if name:
            return NamedZone(name)

    raise InvalidTimezoneError(
        'Valid timezone expected, got {}'.format(_describe(value))
    )
