#!/usr/bin/env python
from setuptools import setup, find_packages
import sys


long_description = ''

if 'upload' in sys.argv:
    with open('README.rst') as f:
        long_description = f.read()


setup(
    name='fullypeek',
    version='0.1.0',
    description='An iterator that can peek forward any number of elements',
    author='Joe Jevnik',
    author_email='joejev@gmail.com',
    packages=find_packages(exclude=['tests']),
    long_description=long_description,
    license='GPLv3+',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',  # noqa
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing',
    ],
    entry_points={
        'console_scripts': [
            'fullypeek = fullypeek.__main__:main',
        ],
    },
    install_requires=[
        'click',
    ],
    extras_require={
        'dev': [
            'flake8',
            'pytest',
            'pytest-cov',
        ],
    },
)
