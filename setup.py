#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
import codecs
import setuptools


def read(fname):
    file_path = os.path.join(os.path.dirname(__file__), fname)
    return codecs.open(file_path, encoding='utf-8').read()


setuptools.setup(
    name='sorted-bounds',
    version='0.1.0',
    license='Mozilla Public License 2.0',
    description='Lower bound, upper bound and binary search over sorted sequences with monotonic predicates',
    long_description=read('README.rst'),
    packages=setuptools.find_packages(include=['sorted_bounds', 'sorted_bounds.*']),
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': ['pytest>=3.5.0'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
    ],
)
