# SPDX-FileCopyrightText: 2025 sshare contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="sshare",
    version="0.1.0",
    description="sshare — threshold secret sharing over prime fields",
    author="sshare contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "sympy>=1.12",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sshare=sshare.cli:main",
        ],
    },
)
