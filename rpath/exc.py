"""Defines the base class for errors in rpath and the errors raised by
the library.
"""


def get_error_msg(error):
    """Returns the message to show for an error.

    :param error: error object or string
    :returns: 2-tuple of: message string and a boolean indicating whether
              a traceback should be shown or not
    """
    if isinstance(error, Error):
        # expected error
        return error.msg, False
    elif isinstance(error, OSError):
        # normal error e.g. FileNotFoundError, PermissionError
        msg = error.strerror or str(error)
        if getattr(error, 'filename', None):
            msg += ': ' + str(error.filename)
        return msg, False
    else:
        # unexpected error
        return 'Looks like you found a bug', True


class Error(Exception):
    """Base class for all errors in rpath.

    Subclasses may define a 'description' attribute which explains the
    error in a user friendly way, 'msg' holds the specific path or lookup
    that caused it.
    """
    description = ''
    msg = '<Unknown Error>'

    def __init__(self, msg, description=None):
        super().__init__(msg)
        self.msg = msg
        if description:
            self.description = description
            # else class attribute is used

    def __repr__(self):
        return "<{}: {}>".format(
            self.__class__.__name__,
            self.msg
        )

    def __str__(self):
        msg = '' + self.msg.strip()
        if self.description:
            msg += '\n\n' + self.description.strip() + '\n'
        return msg


class EnvironmentLookupError(Error):
    """Error thrown when the current working directory or the home
    directory cannot be determined.
    """
    description = (
        'The operating system did not report the requested directory. '
        'The current directory may have been removed, or no home '
        'directory is configured for this user.'
    )

    def __init__(self, what, error=None):
        self.what = what
        self.error = error
        msg = 'Failed to get {}'.format(what)
        if error is not None:
            msg += ': {}'.format(get_error_msg(error)[0])
        super().__init__(msg)


class FilesystemAccessError(Error):
    """Error thrown when a directory cannot be enumerated or an entry
    cannot be inspected.
    """

    def __init__(self, path, error=None):
        self.path = path
        self.error = error
        if error is None:
            reason = 'no path set'
        elif isinstance(error, OSError):
            reason = get_error_msg(error)[0]
        else:
            # e.g. ValueError for an embedded null byte
            reason = str(error)
        super().__init__('Cannot read {!r}: {}'.format(path, reason))


class MalformedPathError(Error):
    """Error thrown when a path has no final component to work on.
    """
    description = 'The path is empty, a root or ends in "..".'

    def __init__(self, path, operation):
        self.path = path
        super().__init__(
            'Cannot get {} of path: {!r}'.format(operation, path)
        )
