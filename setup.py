"""Setup script for logfacade."""

import re
from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def read_version():
    """Read __version__ from the package without importing it."""
    init = (HERE / "logfacade" / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r'^__version__ = "([^"]+)"', init, re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in logfacade/__init__.py")
    return match.group(1)


setup(
    name="logfacade",
    version=read_version(),
    description="Severity-leveled logging facade with lazy, producer-based and format-string emission",
    python_requires=">=3.10",
    packages=find_packages(include=["logfacade", "logfacade.*"]),
    install_requires=[
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
