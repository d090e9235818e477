"""A small value type wrapping a filesystem path string, with helpers for
joining, splitting and querying paths.
"""
__version__ = '0.1.0'


## export the public API

from .exc import (
    Error, EnvironmentLookupError, FilesystemAccessError, MalformedPathError
)
from .path import RPath
from .local import DirEntry, read_dir
