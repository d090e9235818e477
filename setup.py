from setuptools import setup, find_packages


## meta data
__version__ = "0.1.0"
__author__  = "Abdul-Hakeem Shaibu"
__description__ = "rpath"
__long_description__ = \
'''A small value type wrapping a filesystem path string, with helpers for
joining, splitting and querying paths.
'''


requires = [
]

tests_requires = [
    'pytest',
    'pytest-cov'
]

setup(
    name='rpath',
    version=__version__,
    description=__description__,
    long_description=__long_description__,
    author=__author__,
    author_email='hkmshb@gmail.com',
    keywords='path filesystem',
    zip_safe=False,
    packages=find_packages(exclude=['tests', 'tests.*']),
    platforms='any',
    python_requires='>=3.10',
    install_requires=requires,
    extras_require={
        'test': tests_requires
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Filesystems',
        'Topic :: Software Development :: Libraries'
    ]
)
