# coding: utf-8
from typing import Text

# Engine error codes. The numbering follows ICU's UErrorCode so the codes
# read the same as what people are used to see from intl libraries.
ILLEGAL_ARGUMENT_ERROR = 1
MISSING_RESOURCE_ERROR = 2
INVALID_FORMAT_ERROR = 3


class LocalTimeError(Exception):
    """
    Base class of all the errors raised by this package
    """


class EngineError(LocalTimeError):
    """
    Raised by the formatting engine when it can't do its job. It carries the
    engine's message and numeric code.
    """

    def __init__(self, message: Text, code: int):
        super(EngineError, self).__init__(message, code)
        self.message = message
        self.code = code

    def __str__(self):
        return '{} ({})'.format(self.message, self.code)


class FormatError(LocalTimeError):
    """
    Raised when an instant could not be formatted. The `message` and `code`
    attributes are the ones reported by the engine.
    """

    def __init__(self, text: Text, message: Text, code: int):
        super(FormatError, self).__init__(text)
        self.message = message
        self.code = code


class InvalidTimezoneError(LocalTimeError, ValueError):
    """
    Raised when something that is not a known timezone representation is
    given, or when two timezones of different representations are compared.
    """
