# coding: utf-8
import os

# Are we in debug mode? The CLI logs at debug level when it is the case.
DEBUG = os.getenv('DEBUG') == 'yes'

# Locale used when none was explicitly set on a formatter. When empty, the
# system's LC_TIME locale is used (as read from the environment).
DEFAULT_LOCALE = os.getenv('HORAE_LOCALE') or None

# Timezone used when none was explicitly set on a formatter. When empty, the
# system's local timezone is used (which honors TZ).
DEFAULT_TIMEZONE = os.getenv('HORAE_TIMEZONE') or None

# Locale to use when the system doesn't tell us anything. "C" ends up being
# formatted as POSIX english.
FALLBACK_LOCALE = 'C'

# Timezone to use when the system's local timezone has no name we can use
FALLBACK_TIMEZONE = 'UTC'
