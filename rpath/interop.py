"""Adapter for handing RPath values to and from a dynamic host that only
understands native strings, e.g. an embedding interpreter or a plugin API.

The core rpath modules never import this module.
"""
import sys

from rpath.path import RPath


def to_native(value):
    """Returns the path of an RPath as an interned str.

    :param value: an RPath object
    """
    if not isinstance(value, RPath):
        raise TypeError('Expected an RPath, got {!r}'.format(value))
    return sys.intern(value.convert_to_string())


def from_native(value):
    """Returns an RPath for a host string, bytes or path like object."""
    return RPath.from_path(value)
