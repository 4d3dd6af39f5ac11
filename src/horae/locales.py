# coding: utf-8
from typing import Text

POSIX_LOCALES = {'C', 'POSIX'}
POSIX_ENGINE_LOCALE = 'en_US_POSIX'


def normalize_locale(locale: Text) -> Text:
    """
    Transform a system or BCP-47 locale identifier into something the engine
    understands: "de-DE" becomes "de_DE" and the "C"/"POSIX" pseudo-locales
    become POSIX english. Encodings ("en_US.UTF-8") are left in place, the
    engine knows how to ignore them.
    """

    base, dot, encoding = locale.partition('.')

    if base in POSIX_LOCALES:
        return POSIX_ENGINE_LOCALE

    return base.replace('-', '_') + dot + encoding
