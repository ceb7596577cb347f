"""
Setup script for the warmpath project.

Allows development installation with `pip install -e .`
"""

import os

from setuptools import setup, find_packages

version = {}
with open(os.path.join(os.path.dirname(__file__), "warmpath", "version.py")) as f:
    exec(f.read(), version)

setup(
    name="warmpath",
    version=version["__version__"],
    description="Connection-strategy engine: similarity scoring and warm-path discovery",
    packages=find_packages(include=["warmpath", "warmpath.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",
        "python-dotenv>=1.0",
        "tenacity>=8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "warmpath-find=warmpath.cli:main",
        ],
    },
)
