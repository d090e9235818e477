"""Directory enumeration on the local file system.
"""
import os
import stat
import logging

from rpath.exc import FilesystemAccessError
from rpath.path import RPath

log = logging.getLogger('rpath.local')


class DirEntry:
    """Record for one child of an enumerated directory.

    Type checks use the information the OS returned while listing the
    directory where possible and never raise; a child that disappeared in
    the meantime simply reports False.
    """
    __slots__ = ('name', 'path', '_entry')

    def __init__(self, entry):
        self._entry = entry
        self.name = entry.name
        self.path = RPath(entry.path)

    def is_dir(self):
        try:
            return self._entry.is_dir()
        except OSError:
            return False

    def is_file(self):
        try:
            return self._entry.is_file()
        except OSError:
            return False

    def is_symlink(self):
        try:
            return self._entry.is_symlink()
        except OSError:
            return False

    def file_type(self):
        """Returns one of 'symlink', 'dir', 'file' or 'other'. Symlinks are
        not followed.
        """
        if self.is_symlink():
            return 'symlink'
        try:
            mode = self._entry.stat(follow_symlinks=False).st_mode
        except OSError:
            return 'other'
        if stat.S_ISDIR(mode):
            return 'dir'
        elif stat.S_ISREG(mode):
            return 'file'
        return 'other'

    def metadata(self):
        """Returns the os.stat_result for this entry, without following
        symlinks.

        :raises FilesystemAccessError: when the entry cannot be stat'ed
        """
        try:
            return self._entry.stat(follow_symlinks=False)
        except OSError as error:
            raise FilesystemAccessError(self.path.path, error) from error

    def __eq__(self, other):
        return isinstance(other, DirEntry) and other.path == self.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return "<{}: {}>".format(
            self.__class__.__name__,
            self.path
        )


def read_dir(path):
    """Returns an iterator over the direct children of the directory at
    path, yielding DirEntry objects in the order the OS reports them.
    The iterator can be consumed only once; stop iterating to stop early.

    :param path: an RPath or anything RPath accepts
    :raises FilesystemAccessError: when the path is empty, does not exist,
        is not a directory or cannot be read. Raised on call, not on first
        iteration.
    """
    path = RPath(path)
    if not path.path:
        raise FilesystemAccessError(path.path)

    try:
        scandir_it = os.scandir(path.path)
    except (OSError, ValueError) as error:
        log.debug('Failed to open dir {}: {}'.format(path, error))
        raise FilesystemAccessError(path.path, error) from error

    return _entry_iter(scandir_it, path)


def _entry_iter(scandir_it, path):
    # inner iter so that opening errors surface in read_dir() itself
    with scandir_it:
        while True:
            try:
                entry = next(scandir_it)
            except StopIteration:
                return
            except OSError as error:
                raise FilesystemAccessError(path.path, error) from error
            yield DirEntry(entry)
