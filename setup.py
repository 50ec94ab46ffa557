#! /usr/bin/env python
#
# Copyright (c) 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from setuptools import setup, find_packages
from pathlib import Path


with Path(__file__).parent.joinpath('README.rst').open() as readme:
    long_description = readme.read()


setup(
    name='xsd-zod',
    version='0.1.0',
    packages=find_packages(include=['xsdzod*']),
    package_data={
        'xsdzod': ['templates/*/*.jinja', 'locale/*.pot', 'locale/*/LC_MESSAGES/*.po',
                   'locale/*/LC_MESSAGES/*.mo'],
    },
    entry_points={
        'console_scripts': [
            'xsd-zod=xsdzod.cli:main',
        ]
    },
    python_requires='>=3.9',
    install_requires=['lxml', 'jinja2'],
    extras_require={
        'dev': ['coverage', 'pytest', 'flake8', 'mypy'],
    },
    author='Davide Brunato',
    author_email='brunato@sissa.it',
    license='MIT',
    description='Generate TypeScript types and Zod validators from XSD schemas',
    long_description=long_description,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Text Processing :: Markup :: XML',
    ]
)
