#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = ['pyyaml>=5.1']

test_requirements = ['pytest']

setup(
    name='simplesum',
    version='0.1.0',
    description="A two-integer adder with yaml configured logging.",
    long_description=readme,
    author="simplesum developers",
    license="BSD license",
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ],
    packages=find_packages(exclude=['tests']),
    package_data={'simplesum': ['config.yaml']},
    install_requires=requirements,
    extras_require={'test': test_requirements},
    zip_safe=False,
)
