"""Setup script for featmatrix."""

from setuptools import find_packages, setup

setup(
    name="featmatrix",
    version="0.1.0",
    description="Run cargo build, check, clippy and test once per feature set",
    python_requires=">=3.10",
    packages=find_packages(include=["featmatrix", "featmatrix.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "featmatrix=featmatrix.__main__:main",
        ],
    },
)
