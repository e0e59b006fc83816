#!/usr/bin/env python3
# coding: utf-8

import setuptools

with open('README.md', 'r') as f:
    long_description = f.read()

setuptools.setup(
    name='complexn',
    version='0.1.0',
    description='Double-precision complex numbers and special functions',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='GNU GPLv3',
    classifiers=[
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
    packages=setuptools.find_namespace_packages(
        include=['complexn', 'complexn.*']
    ),
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest', 'scipy', 'sympy'],
    },
)
