"""Build type enum."""

from enum import StrEnum


class BuildType(StrEnum):
    """Whether a build produces snapshot or release artifacts."""

    snapshot = "snapshot"
    """The build produces pre-release artifacts."""

    release = "release"
    """The build produces release artifacts."""
