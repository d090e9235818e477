"""Provides a wrapper class for os.environ and the lookups of the current
working directory and the home directory.

Nothing here is cached: every lookup reads the process state at call time
so changes made with os.chdir() or to $HOME are picked up.
"""
import os
import logging
import collections.abc

from rpath.exc import EnvironmentLookupError

log = logging.getLogger('rpath.env')


class Environ(collections.abc.MutableMapping):

    def __getitem__(self, key):
        return os.environ[key]

    def __setitem__(self, key, value):
        os.environ[key] = value

    def __delitem__(self, key):
        del os.environ[key]

    def __iter__(self):
        return iter(os.environ)

    def __len__(self):
        return len(os.environ)

    def get(self, key, default=None):
        """Get a parameter from the environment like os.environ.get().

        :param key: the parameter to get
        :param default: the default if param does not exists
        :returns: string
        """
        try:
            value = self[key]
        except KeyError:
            return default
        else:
            if not value or value.isspace():
                return default
            return value


environ = Environ() # Singleton


def get_current_dir():
    """Returns the current working directory of the process.

    :raises EnvironmentLookupError: when the directory is gone or not
        accessible anymore
    """
    try:
        return os.getcwd()
    except OSError as error:
        raise EnvironmentLookupError('current dir', error) from error


def _passwd_home():
    if os.name == 'nt':
        return None

    import pwd
    try:
        return pwd.getpwuid(os.getuid()).pw_dir or None
    except KeyError:
        # uid has no passwd entry, e.g. in minimal containers
        return None


def get_home_dir():
    """Returns the home directory of the current user.

    Looks at $HOME first, on Windows then at $USERPROFILE and
    $HOMEDRIVE + $HOMEPATH, and on Unix falls back to the passwd database.

    :raises EnvironmentLookupError: when no home directory can be found
    """
    home = environ.get('HOME')
    if home is None and os.name == 'nt':
        home = environ.get('USERPROFILE')
        if home is None and environ.get('HOMEDRIVE') \
            and environ.get('HOMEPATH'):
            home = environ['HOMEDRIVE'] + environ['HOMEPATH']
        if home is not None:
            log.debug('Resolved home dir from Windows profile: {}'.format(home))
    if home is None:
        home = _passwd_home()
        if home is not None:
            log.debug('Env variable $HOME not set, using passwd entry: {}'
                      .format(home))
    if home is None:
        raise EnvironmentLookupError('home dir')

    if not os.path.isdir(home):
        logmsg = 'Home dir does not point to an existing directory: {}'
        log.warning(logmsg.format(home))
    return home
