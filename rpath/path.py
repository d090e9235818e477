"""Provides the RPath class, a small value type around a filesystem path
string with methods for path manipulation and filesystem queries.
"""
import os
import sys
import logging
import pathlib
from functools import total_ordering

from rpath import env
from rpath.exc import MalformedPathError

log = logging.getLogger('rpath')


#: consts
_SEPS = (os.path.sep, os.path.altsep) if os.path.altsep else (os.path.sep,)
_SEPCHARS = ''.join(_SEPS)
_TRAILING_DOT = tuple(s + '.' for s in _SEPS)


def _coerce(path):
    # takes any accepted input and returns the path as a string
    if isinstance(path, RPath):
        return path.path
    try:
        return os.fsdecode(path)
    except TypeError:
        raise TypeError('Cannot convert {!r} to an RPath'.format(path)) \
            from None


def _split_root(path):
    # returns (root, rest) where root is the drive plus leading separators
    drive, rest = os.path.splitdrive(path)
    stripped = rest.lstrip(_SEPCHARS)
    return drive + rest[:len(rest) - len(stripped)], stripped


def _split_tail(path):
    # returns (parent, name); trailing separators and '.' names are ignored
    root, rest = _split_root(path)
    rest = rest.rstrip(_SEPCHARS)
    while rest == '.' or rest.endswith(_TRAILING_DOT):
        rest = rest[:-1].rstrip(_SEPCHARS)

    idx = max(rest.rfind(sep) for sep in _SEPS)
    head, name = rest[:idx + 1].rstrip(_SEPCHARS), rest[idx + 1:]
    return root + head, name


@total_ordering
class RPath:
    """Represents a filesystem path as a plain string.

    The path is stored verbatim: construction never checks the filesystem
    and never normalizes, so "/a/b" and "/a/b/" are two different values.
    An empty path means no path is set.

    Manipulation methods return new RPath objects. 'join_multiple()' and
    'clear()' are the only methods that change the object itself.

    Accepts strings, bytes (decoded with the filesystem encoding) and any
    os.PathLike object, including pathlib paths and other RPath objects.
    """
    __slots__ = ('path',)

    def __init__(self, path=''):
        self.path = _coerce(path)

    @classmethod
    def new(cls):
        """Returns an empty RPath."""
        return cls()

    @classmethod
    def from_path(cls, path):
        return cls(path)

    @classmethod
    def pwd(cls):
        """Returns an RPath for the current working directory.

        :raises EnvironmentLookupError: when the OS fails to report it
        """
        return cls(env.get_current_dir())

    @classmethod
    def gethomedir(cls):
        """Returns an RPath for the home directory of the current user.

        :raises EnvironmentLookupError: when no home directory is found
        """
        return cls(env.get_home_dir())

    ## manipulation

    def join(self, segment):
        """Returns a new RPath with segment appended using the platform
        separator. An absolute segment replaces the path altogether.

        :param segment: a string, bytes or path like object
        """
        return self.__class__(os.path.join(self.path, _coerce(segment)))

    def joinpath(self, *segments):
        """Returns a new RPath with all segments joined in order."""
        new = self.__class__(self)
        new.join_multiple(segments)
        return new

    def join_multiple(self, segments):
        """Joins each of segments in order onto this path, in place.

        :param segments: an iterable of strings, bytes or path like objects
        """
        path = self.path
        for segment in segments:
            path = os.path.join(path, _coerce(segment))
        self.path = path

    def basename(self):
        """Returns the final component of the path, or an empty string
        when there is none e.g. for an empty path, a root or "foo/..".
        """
        name = _split_tail(self.path)[1]
        return '' if name == '..' else name

    def with_basename(self, name):
        """Returns a new RPath with the final component replaced by name.

        Afterwards basename() gives name back, except for ".." which never
        counts as a basename.
        """
        return self.dirname().join(name)

    def dirname(self):
        """Returns the parent path as a new RPath.

        The parent of a root is the root itself, the parent of a single
        relative name (or of an empty path) is an empty RPath.
        """
        return self.__class__(_split_tail(self.path)[0])

    def with_dirname(self, parent):
        """Returns a new RPath combining parent with this basename.
        """
        basename = self.basename()
        if not basename:
            return self.__class__(parent)
        return self.__class__(parent).join(basename)

    def extension(self):
        """Returns the part of the basename after the last dot. When the
        basename contains no dot the basename itself is returned, so
        RPath("/temp/Makefile").extension() gives "Makefile".

        :raises MalformedPathError: when the path has no basename
        """
        basename = self.basename()
        if not basename:
            raise MalformedPathError(self.path, 'extension')
        return basename.rsplit('.', 1)[-1]

    def expand(self):
        """Returns the canonical, absolute form of the path with '.' and
        '..' resolved and symbolic links followed.

        Only existing paths are expanded; for a path that does not exist
        an unchanged copy is returned.
        """
        if not self.path:
            return self.__class__()
        try:
            return self.__class__(os.path.realpath(self.path, strict=True))
        except (OSError, ValueError) as error:
            log.debug('Not expanding {}: {}'.format(self.path, error))
            return self.__class__(self)

    def clear(self):
        """Resets the path to empty, in place."""
        self.path = ''

    def read_dir(self):
        """Returns an iterator over the entries of this directory.

        See rpath.local.read_dir() for details.

        :raises FilesystemAccessError: when the directory cannot be opened
        """
        from rpath.local import read_dir
        return read_dir(self)

    ## conversion

    def convert_to_string(self):
        return self.path

    def lossy_string(self):
        """Returns the path with undecodable bytes replaced by U+FFFD, safe
        to encode with any UTF codec.
        """
        try:
            raw = os.fsencode(self.path)
        except UnicodeEncodeError:
            return self.path.encode('utf-8', 'replace').decode('utf-8')
        return raw.decode(sys.getfilesystemencoding(), 'replace')

    def convert_to_pathbuf(self):
        """Returns the path as a pathlib.Path object."""
        return pathlib.Path(self.path)

    def __fspath__(self):
        return self.path

    ## predicates

    def exists(self):
        return os.path.exists(self.path)

    def is_dir(self):
        return os.path.isdir(self.path)

    def is_file(self):
        return os.path.isfile(self.path)

    def is_symlink(self):
        return os.path.islink(self.path)

    def is_absolute(self):
        return os.path.isabs(self.path)

    def is_relative(self):
        return not self.is_absolute()

    ## display

    def print(self, file=None):
        """Writes the path followed by a newline to file, which defaults
        to sys.stdout.
        """
        if file is None:
            file = sys.stdout
        try:
            file.write(self.path + '\n')
        except UnicodeEncodeError:
            # undecodable bytes kept as surrogates by os.fsdecode()
            buffer = getattr(file, 'buffer', None)
            if buffer is not None:
                try:
                    raw = os.fsencode(self.path)
                except UnicodeEncodeError:
                    raw = os.fsencode(self.lossy_string())
                file.flush()
                buffer.write(raw + b'\n')
                buffer.flush()
                return
            encoding = getattr(file, 'encoding', None) or 'utf-8'
            text = self.lossy_string().encode(encoding, 'replace')
            file.write(text.decode(encoding) + '\n')

    def __eq__(self, other):
        if not isinstance(other, RPath):
            return NotImplemented
        return self.path == other.path

    def __lt__(self, other):
        if not isinstance(other, RPath):
            return NotImplemented
        return self.path < other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return "<{}: {}>".format(
            self.__class__.__name__,
            self.path
        )

    def __str__(self):
        return self.path
