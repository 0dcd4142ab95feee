#!/usr/bin/env python3
"""
Setup script for simple-loc-compat
"""

from setuptools import setup, find_packages

setup(
    name="simple-loc-compat",
    version="0.1.0",
    description="Helper names and nested-namespace lookups of the simple localization plugin",
    packages=find_packages(include=["simple_loc", "simple_loc.*"]),
    python_requires=">=3.9",
    install_requires=[
        # Web Framework
        "fastapi>=0.104.1",

        # Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # Translation files
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25.2",
        ],
    },
    package_data={
        "simple_loc": ["py.typed"],
    },
)
