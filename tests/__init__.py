import os
import shutil
import logging
import os.path as osp


HERE = osp.abspath(osp.dirname(__file__))
TMPDIR = osp.abspath(osp.join(HERE, 'tmp'))


def _setup_environment():
    '''Method to be run once before test suite starts'''
    os.environ.update({
        'RPATH_TEST_ROOT': os.getcwd(),
    })

    if osp.isdir(TMPDIR):
        shutil.rmtree(TMPDIR)
    os.makedirs(TMPDIR)


_setup_environment()


class LoggingFilter(logging.Filter):
    '''Convenience class to supress rpath errors and warnings in the test
    suite. Acts as a context manager and can be used with the 'with' keyword.
    '''
    # logging channels inherit handlers of parents but not filters, so the
    # filter goes both on the channel and on the top level handlers

    def __init__(self, logger, message=None):
        '''Constructor.

        :param logger: the logging channel name
        :param message: can be a string, or a sequence of strings
        '''
        self.logger = logger
        self.message = message

    def __enter__(self):
        logging.getLogger(self.logger).addFilter(self)
        for handler in logging.getLogger().handlers:
            handler.addFilter(self)

    def __exit__(self, *exc_info):
        logging.getLogger(self.logger).removeFilter(self)
        for handler in logging.getLogger().handlers:
            handler.removeFilter(self)

    def filter(self, record):
        if record.name.startswith(self.logger):
            msg = record.getMessage()
            if self.message is None:
                return False
            elif isinstance(self.message, tuple):
                return not any(msg.startswith(m) for m in self.message)
            else:
                return not msg.startswith(self.message)
        else:
            return True


class TestMixin:
    '''Class with helper functions for test cases.
    '''
    @classmethod
    def clear_tmp_dir(cls, name=None):
        '''Clears the tmp dir for this test.
        '''
        pth = cls._get_tmp_name(name)
        if osp.lexists(pth):
            shutil.rmtree(pth)
        assert not osp.exists(pth), (
            'This path should not exist: {}'.format(pth)
        )
        return pth

    @classmethod
    def create_tmp_dir(cls, name=None):
        '''Returns a path to a tmp dir where tests can write data. The dir is
        removed and recreated empty every time this function is called with
        the same name from the same class.
        '''
        pth = cls.clear_tmp_dir(name)
        os.makedirs(pth)
        assert osp.exists(pth)
        return pth

    @classmethod
    def get_tmp_name(cls, name=None):
        '''Returns the same path as create_tmp_dir() but without touching it.
        This method will raise an exception when a file or dir exists of the
        same.
        '''
        pth = cls._get_tmp_name(name)
        assert not osp.exists(pth), (
            'This path should not exist: {}'.format(pth)
        )
        return pth

    @classmethod
    def _get_tmp_name(cls, name):
        if name:
            assert not os.path.sep in name, (
                "Dont use this method to get sub folders or file")
            name = cls.__name__ + '_' + name
        else:
            name = cls.__name__
        return osp.join(TMPDIR, name)
