#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
ConfWeaver: flat KEY=VALUE configuration files

Parse hand-edited deployment files with '#' comments into immutable
key/value mappings, and export them as environment variables at startup.

Version: 0.1
License: MIT (see LICENSE)
"""

from setuptools import setup, find_packages
import os

# Read version from package
version = {}
with open(os.path.join(os.path.dirname(__file__), "confweaver", "version.py")) as f:
    exec(f.read(), version)

# Read long description from README
with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

# Read requirements from requirements.txt
def read_requirements(filename):
    """Read requirements from file."""
    filepath = os.path.join(os.path.dirname(__file__), filename)
    if not os.path.exists(filepath):
        return []
    with open(filepath, "r") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="confweaver",
    version=version["__version__"],
    author="ConfWeaver Development Team",
    description="Flat KEY=VALUE configuration file parser with environment export",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "dev": read_requirements("requirements-dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "confweaver=confweaver.cli:main",
        ],
    },
    zip_safe=False,
    keywords="configuration config env dotenv key-value parser",
)
