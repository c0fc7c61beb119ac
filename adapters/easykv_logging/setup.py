# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Setup configuration for easykv_logging adapter."""

from setuptools import find_packages, setup

setup(
    name="easykv-logging",
    version="0.1.0",
    description="Structured logging adapter for easyKV backends",
    author="easyKV contributors",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # No external dependencies - uses stdlib only
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
    ],
)
