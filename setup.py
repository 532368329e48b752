#!/usr/local/bin/python3

from setuptools import find_packages, setup

VERSION = '0.1.0'
PYTHON_REQUIRES = '3.8'

packagedata = {
    'include_package_data': True,
    'name': "dscreds",
    'version': VERSION,
    'description': "Typed datasource credential models for reporting platform connections.",
    'classifiers': ["Development Status :: 4 - Beta", "License :: OSI Approved :: Apache Software License",
                    "Operating System :: OS Independent"],
    'python_requires': f'>={PYTHON_REQUIRES}',
    'install_requires': [],
    'extras_require': {'test': []},
    'packages': find_packages(exclude=['tests', 'tests.*', ]),
    'package_data': {'dscreds': ['templates/*.yml', 'templates/*.json']},
    'entry_points': {'console_scripts': ['dscreds=dscreds.core.main:cli']}
}

with open('./README.md') as readme:  # noqa pylint: disable=unspecified-encoding
    packagedata['long_description'] = readme.read()
    packagedata['long_description_content_type'] = 'text/markdown'

for file_name, target in (('base.txt', packagedata['install_requires']),
                          ('test.txt', packagedata['extras_require']['test'])):
    with open(f'./requirements/{file_name}', 'r') as requirements:  # noqa pylint: disable=unspecified-encoding
        for line in requirements.readlines():
            line = line.strip()
            if line and not line.startswith(('-r', '#')):
                target.append(line)

setup(**packagedata)
