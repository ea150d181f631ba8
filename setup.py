#!/usr/bin/env python3

"""texcrop setup module."""

from os import path

from setuptools import find_packages, setup

HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, 'README.md'), encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='texcrop',
    version='0.0.1',
    description='Temporal cropping layer with CPU and texture-backed '
                'GPU execution.',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='cropping inference gpu texture torch',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8, <4',
    install_requires=['torch', 'numpy'],
    extras_require={
        'dev': ['check-manifest'],
        'test': ['pytest', 'pytest-cov'],
    },
)
