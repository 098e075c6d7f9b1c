"""Setup configuration for enumorph - Enum conversion by ordered matchers."""

from pathlib import Path
import re

from setuptools import setup, find_packages

HERE = Path(__file__).resolve().parent


def _read(relative_path, default=None):
    """Return the text of a file next to setup.py, or default if it is missing."""
    path = HERE / relative_path
    if default is not None and not path.exists():
        return default
    return path.read_text(encoding="utf-8")


# The CLI module holds the single source of truth for the version
_version_match = re.search(
    r'^__version__\s*=\s*["\']([^"\']+)["\']', _read("enumorph/cli.py"), re.MULTILINE
)
if _version_match is None:
    raise RuntimeError("Unable to find __version__ in enumorph/cli.py")

REQUIREMENTS = [
    line.strip()
    for line in _read("requirements.txt").splitlines()
    if line.strip() and not line.startswith("#")
]


setup(
    name="enumorph",
    version=_version_match.group(1),
    description="Resolve values into enum members with ordered matchers and fallbacks",
    long_description=_read("README.md", default=""),
    long_description_content_type="text/markdown",
    author="enumorph Team",
    license="MIT",
    python_requires=">=3.9",
    install_requires=REQUIREMENTS,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "enumorph=enumorph.cli:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
    keywords="enum conversion mapping matcher fallback",
)
