# coding: utf-8
from .errors import FormatError, InvalidTimezoneError, LocalTimeError
from .timezones import EngineZone, NamedZone, make_timezone
from .local_time import LocalTime

__version__ = '0.1.0'
