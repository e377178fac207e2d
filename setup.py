#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='bookshelf-graphql',
    version='0.1.0',
    description='In-memory GraphQL API for authors and their books',
    long_description=read("README.rst"),
    packages=['bookshelf', 'bookshelf.graph'],
    package_data={
        'bookshelf': ['templates/*.html'],
    },
    install_requires=[
        "graphlayer[graphql]==0.2.8",
        "Flask>=1.0",
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        "test": ["pytest", "precisely"],
    },
    entry_points={
        "console_scripts": [
            "bookshelf=bookshelf.server:main",
        ],
    },
    keywords="graphql books authors",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
