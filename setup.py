#!/usr/bin/env python3
"""
Setup configuration for shell-bookmarks
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="shell-bookmarks",
    version="1.0.0",
    author="",
    author_email="",
    description="Generate lf jump maps, zsh named directories and cd aliases from a plain-text bookmarks file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["shell_bookmarks", "shell_bookmarks.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: System :: Shells",
        "Topic :: Utilities",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "shell-bookmarks=shell_bookmarks.main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
