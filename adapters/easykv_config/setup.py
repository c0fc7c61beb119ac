# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Setup configuration for easykv-config package."""

from setuptools import find_packages, setup

setup(
    name="easykv-config",
    version="0.1.0",
    author="easyKV contributors",
    description="Configuration providers for easyKV backends",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        # No external dependencies - uses stdlib only
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
