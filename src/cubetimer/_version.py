"""Utilities for retrieving and validating the package version."""

from __future__ import annotations

import os
import re
from importlib import metadata
from pathlib import Path

from packaging.version import InvalidVersion, Version

_PACKAGE_NAME = "cubetimer"
_RELEASE_ENV_VAR = "CUBETIMER_RELEASE_VERSION"


def _version_from_sources() -> str:
    """Return the newest ``## vX.Y.Z`` heading of the repository changelog.

    Used in development checkouts where distribution metadata is missing.
    """

    for parent in Path(__file__).resolve().parents[:3]:
        changelog = parent / "CHANGELOG.md"
        if not changelog.is_file():
            continue
        for line in changelog.read_text(encoding="utf-8").splitlines():
            match = re.match(r"^## v(?P<version>\d+\.\d+\.\d+)\b", line)
            if match:
                return match.group("version")

    raise RuntimeError(
        f"Unable to determine the '{_PACKAGE_NAME}' version from package metadata or "
        "repository sources."
    )


def _load_version() -> str:
    """Return the validated ``MAJOR.MINOR.PATCH`` package version.

    ``$CUBETIMER_RELEASE_VERSION`` overrides the installed metadata so release
    tooling can stamp builds.
    """

    raw_version = os.environ.get(_RELEASE_ENV_VAR)
    if not raw_version:
        try:
            raw_version = metadata.version(_PACKAGE_NAME)
        except metadata.PackageNotFoundError:
            raw_version = _version_from_sources()

    try:
        parsed = Version(raw_version)
    except InvalidVersion as exc:
        raise RuntimeError(
            f"Invalid version string for '{_PACKAGE_NAME}': "
            f"{raw_version!r}. Expected a semantic version."
        ) from exc

    if len(parsed.release) != 3:
        raise RuntimeError(
            f"The '{_PACKAGE_NAME}' version must follow the MAJOR.MINOR.PATCH format. "
            f"Found: {raw_version!r}."
        )

    return raw_version


__version__ = _load_version()

__all__ = ["__version__"]
