#!/usr/bin/env python
"""
Copyright 2026 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from setuptools import find_packages, setup

from storecodec import __version__

install_requires = [
    'colorama>=0.4',
    'configargparse>=1.7',
    'pydantic>=2.0',
    'pyyaml>=6.0',
    'structlog>=23.1',
    'typing-extensions>=4.6',
]

setup(
    name='storecodec',
    version=__version__,
    description='Pluggable binary serialization layer for typed storage records',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    python_requires='>=3.10',
    entry_points={
        'console_scripts': ['storecodec-cli=storecodec_cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('storecodec_tests', 'storecodec_tests.*')),
    package_data={
        'storecodec.conf': ['*.yml'],
    },
    install_requires=install_requires,
    extras_require={
        'tests': ['pytest>=7.0'],
    },
)
