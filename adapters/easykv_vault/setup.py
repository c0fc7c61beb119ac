# SPDX-License-Identifier: MIT
# Copyright (c) 2025 easyKV contributors

"""Setup configuration for easykv_vault adapter."""

from setuptools import find_packages, setup

setup(
    name="easykv-vault",
    version="0.1.0",
    description="HashiCorp Vault read backend for easyKV",
    author="easyKV contributors",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "easykv-logging>=0.1.0",
        "easykv-config>=0.1.0",
        "hvac>=2.0.0",
        "requests>=2.28.0",
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
