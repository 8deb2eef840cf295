# Copyright 2019 Adobe. All rights reserved.
# This file is licensed to you under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License. You may obtain a copy
# of the License at http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software distributed under
# the License is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR REPRESENTATIONS
# OF ANY KIND, either express or implied. See the License for the specific language
# governing permissions and limitations under the License.

import os

from setuptools import setup, find_packages

_mydir = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(_mydir, 'README.md')) as f:
    _readme = f.read()

_requires = [r for r in open(os.path.join(_mydir, 'requirements.txt'), "r").read().split('\n') if len(r) > 1]
setup(
    name='stackref',
    version='0.1.0',
    description='stackref - reference resolution for infrastructure stack tests',
    long_description=_readme + '\n\n',
    long_description_content_type='text/markdown',
    python_requires='>=3.11',
    license='Apache2',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Testing',
        'Topic :: System :: Systems Administration',
    ],
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={
        '': ['data/config_schema.json', 'data/stack_schema.json']
    },
    install_requires=_requires,
    extras_require={
        'test': ['pytest'],
    },
)
