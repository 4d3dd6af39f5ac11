# coding: utf-8
import os
from contextlib import contextmanager
from typing import Any, Dict, Optional, Text

from horae.conf import settings
from ..conf import ENVIRONMENT_VARIABLE


def reload_config() -> None:
    """
    Reload the whole configuration.
    """

    # noinspection PyProtectedMember
    settings._reload()


# noinspection PyProtectedMember
@contextmanager
def patch_conf(settings_patch: Optional[Dict[Text, Any]] = None,
               settings_file: Optional[Text] = None):
    """
    Reload the configuration form scratch. Only the default config is loaded,
    not the environment-specified config.

    Then the specified patch is applied. The configuration is reloaded again
    when leaving the context, so patches don't leak between tests.

    This is for unit tests only!

    :param settings_patch: Custom configuration values to insert
    :param settings_file: Settings file to load on top of the defaults
    """

    if settings_patch is None:
        settings_patch = {}

    previous_file = os.environ.get(ENVIRONMENT_VARIABLE)

    reload_config()
    os.environ[ENVIRONMENT_VARIABLE] = settings_file if settings_file else ''

    from horae.conf import settings as l_settings
    # noinspection PyProtectedMember
    r_settings = l_settings._settings
    r_settings.update(settings_patch)

    try:
        yield
    finally:
        if previous_file is None:
            os.environ.pop(ENVIRONMENT_VARIABLE, None)
        else:
            os.environ[ENVIRONMENT_VARIABLE] = previous_file
        reload_config()
