#!/usr/bin/env python
"""
memsh - a single-user shell over an in-memory directory tree, with a CSV audit log
"""
from setuptools import setup, find_packages

# Define required packages
required_packages = [
    "rich>=12.0.0",     # For terminal output
    "pyyaml>=6.0",      # For configuration file support
]

setup(
    name="memsh",
    version="1.0.0",
    description="A single-user shell over an in-memory directory tree with auditable logging",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=required_packages,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "memsh=memsh.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
