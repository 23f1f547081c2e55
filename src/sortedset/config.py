"""Options read from the sortedset configuration file

The file ``sortedset.conf`` is looked up in the directory named by the
environment variable ``SORTEDSETCONFIGPATH`` or else in the user and site
configuration directories. Only its ``[sortedset]`` section is used. Setting
``SORTEDSETNOCONFIGFILE=1`` ignores the file altogether.
"""

import configparser
import os
import warnings
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, List, Optional

import appdirs

FILENAME = 'sortedset.conf'
SECTION = 'sortedset'


def search_paths() -> List[Path]:
    """Candidate configuration files, most specific first"""
    env_dir = os.getenv('SORTEDSETCONFIGPATH')
    if env_dir is not None:
        path = Path(env_dir) / FILENAME
        if not path.is_file():
            raise ValueError(f'SORTEDSETCONFIGPATH is set but {path} does not exist')
        return [path]
    return [
        Path(appdirs.user_config_dir('SortedSet')) / FILENAME,
        Path(appdirs.site_config_dir('SortedSet')) / FILENAME,
    ]


def find_file() -> Optional[Path]:
    return next((path for path in search_paths() if path.is_file()), None)


def read_options(path: Optional[Path] = None) -> Dict[str, str]:
    """Raw option strings of the [sortedset] section"""
    if int(os.getenv('SORTEDSETNOCONFIGFILE', 0)):
        return {}
    if path is None:
        path = find_file()
        if path is None:
            return {}
    parser = configparser.ConfigParser()
    parser.read(path)
    if not parser.has_section(SECTION):
        return {}
    return dict(parser[SECTION])


class Option:
    """An option with a default, converted to the type of the default on assignment"""

    def __init__(self, default, description):
        self.default = default
        self.__doc__ = description

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance, value):
        cls = type(self.default)
        try:
            instance.__dict__[self.name] = cls(value)
        except ValueError as exc:
            raise TypeError(f'Option {self.name} must be {cls.__name__}, got {value!r}') from exc


class Configuration:
    def __init__(self, options: Optional[Dict[str, str]] = None):
        if options is None:
            options = read_options()
        for name, value in options.items():
            if not isinstance(getattr(type(self), name, None), Option):
                warnings.warn(f'Ignoring unknown option {name!r} in {FILENAME}')
                continue
            setattr(self, name, value)

    @contextmanager
    def override(self, **options):
        """Temporarily change options

        >>> from sortedset import SortedSet, conf
        >>> with conf.override(repr_limit=2):
        ...     SortedSet([3, 2, 1])
        SortedSet([1, 2, ...])
        """
        old = {name: getattr(self, name) for name in options}
        for name, value in options.items():
            setattr(self, name, value)
        try:
            yield self
        finally:
            for name, value in old.items():
                setattr(self, name, value)

    def __str__(self):
        return ''.join(f'{name}:\t{value}\n' for name, value in vars(self).items())
