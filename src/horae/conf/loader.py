# coding: utf-8
import logging
import re
import types
from typing import Any, Callable, Dict, Iterable, List, Text

logger = logging.getLogger('horae.conf')

CONFIG_ATTR = re.compile(r'^[A-Z](?:_?[A-Z0-9]+)*$')


def read_settings_file(file_path: Text) -> Dict[Text, Any]:
    """
    Run a plain Python settings file in a throw-away module and return the
    names that look like settings (DEFAULT_LOCALE, not default_locale).

    :raise IOError: if the file can't be read
    """

    namespace = types.ModuleType('horae_settings')
    namespace.__file__ = file_path

    try:
        with open(file_path, encoding='utf-8') as f:
            source = f.read()
    except IOError as e:
        e.strerror = 'Unable to load configuration file ({})'\
            .format(e.strerror)
        raise

    exec(compile(source, file_path, 'exec'), namespace.__dict__)
    logger.debug('Loaded settings from "%s"', file_path)

    return {
        name: value
        for name, value in vars(namespace).items()
        if CONFIG_ATTR.match(name)
    }


class Settings(dict):
    """
    Dictionary of settings whose keys can also be read and written as
    attributes.
    """

    @classmethod
    def from_files(cls, file_paths: Iterable[Text]) -> 'Settings':
        """
        Stack up the given files, later ones winning. Empty paths stand for
        "no file" and are skipped.
        """

        out = cls()

        for file_path in file_paths:
            if file_path:
                # noinspection PyProtectedMember
                out._load(file_path)

        return out

    def __getattr__(self, attr: Text) -> Any:
        try:
            return self[attr]
        except KeyError:
            raise AttributeError('No "{}" setting'.format(attr))

    def __setattr__(self, attr: Text, value: Any) -> None:
        self[attr] = value

    def _load(self, file_path: Text) -> None:
        self.update(read_settings_file(file_path))


class LazySettings(object):
    """
    Proxy to a `Settings` object that is only built at first access, from the
    files listed by `get_files()`. Calling `_reload()` forgets it so the files
    are read again next time.
    """

    def __init__(self, get_files: Callable[[], List[Text]]):
        object.__setattr__(self, '_get_files', get_files)
        object.__setattr__(self, '_loaded', None)

    @property
    def _settings(self) -> Settings:
        if self._loaded is None:
            object.__setattr__(
                self,
                '_loaded',
                Settings.from_files(self._get_files()),
            )

        return self._loaded

    def _reload(self) -> None:
        object.__setattr__(self, '_loaded', None)

    def __getattr__(self, key: Text) -> Any:
        return getattr(self._settings, key)

    def __setattr__(self, key: Text, value: Any) -> None:
        setattr(self._settings, key, value)
