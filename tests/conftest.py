import os
import pytest

import tests


def _touch(path, text=''):
    with open(path, 'w') as fh:
        fh.write(text)


class _Tree(tests.TestMixin):
    pass


@pytest.fixture
def tree(request):
    '''Creates a small directory tree and returns its root path::

        <root>/
            abc.txt         "hello"
            notes.tar.gz
            sub/
                inner.txt
            link -> sub     (only where symlinks are supported)
    '''
    root = _Tree.create_tmp_dir(request.node.name.replace(os.sep, '_'))
    _touch(os.path.join(root, 'abc.txt'), 'hello')
    _touch(os.path.join(root, 'notes.tar.gz'))
    os.mkdir(os.path.join(root, 'sub'))
    _touch(os.path.join(root, 'sub', 'inner.txt'))
    try:
        os.symlink(os.path.join(root, 'sub'), os.path.join(root, 'link'))
    except (OSError, NotImplementedError):
        pass
    return root


@pytest.fixture
def has_symlinks(tree):
    if not os.path.islink(os.path.join(tree, 'link')):
        pytest.skip('symlinks not supported on this platform')
    return tree
