"""Models the major.minor.patch portion of a project version."""

import re
from dataclasses import dataclass
from typing import Final, Self

from .exceptions import InvalidVersionError

CORE_VERSION_PATTERN: Final = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


@dataclass(frozen=True, order=True)
class CoreVersion:
    """Semantic version triplet without any pre-release suffix.

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a core version string.

        Surrounding whitespace is ignored. Leading zeros are accepted.
        Components are bounded only by the interpreter's integer string
        conversion limit.

        Args:
            version_str: Version string in format "major.minor.patch".

        Returns:
            Parsed CoreVersion instance.

        Raises:
            InvalidVersionError: If the string is blank, not three
                dot-separated non-negative integers, or has a component too
                long to convert.
        """
        stripped = version_str.strip()
        if not stripped:
            raise InvalidVersionError(version_str, "version string cannot be blank")

        match = CORE_VERSION_PATTERN.fullmatch(stripped)
        if match is None:
            raise InvalidVersionError(
                version_str,
                "version must consist of three non-negative integers: "
                "major.minor.patch",
            )

        try:
            major, minor, patch = (int(group, 10) for group in match.groups())
        except ValueError as e:
            raise InvalidVersionError(version_str, "component too large") from e
        return cls(major, minor, patch)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch".
        """
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self: Self) -> str:
        return f"CoreVersion({self.major}, {self.minor}, {self.patch})"
