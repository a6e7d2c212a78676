"""Predicates classifying version strings per runtime family."""

import re

import semantic_version

from constants import Constants

_PYPY_PYTHON_VERSION = re.compile(r"[0-9]+\.[0-9]+")


def is_nightly_keyword(version: str) -> bool:
    """Return True for the ``nightly`` alias."""
    return version == Constants.NIGHTLY_KEYWORD


def validate_python_version_format_for_pypy(version: str) -> bool:
    """Return True when version is exactly ``major.minor`` (e.g. ``3.9``).

    PyPy selects the interpreter by its python compatibility version, so
    wildcards (``3.x``), patch levels and bare majors are rejected.
    """
    return _PYPY_PYTHON_VERSION.fullmatch(version) is not None


def validate_version(version: str) -> bool:
    """Return True for ``nightly`` or any valid npm-style semver range.

    Accepts an optional ``v`` prefix, ``x`` wildcards and pre-release
    suffixes (``v7.3.3-rc.1``); each dotted part must be numeric or a
    wildcard, so ``v7.3.b`` is rejected. Blank input is rejected even
    though NpmSpec reads an empty range as ``*``.
    """
    if is_nightly_keyword(version):
        return True
    if not version.strip():
        return False
    try:
        semantic_version.NpmSpec(version)
    except ValueError:
        return False
    return True
