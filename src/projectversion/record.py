"""Structured serialization form of a project version."""

from datetime import UTC, datetime, timedelta
from typing import Final, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .build_type import BuildType
from .core_version import CoreVersion

_EPOCH: Final = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND: Final = timedelta(milliseconds=1)

MIN_BUILD_DATE_MILLIS: Final = (
    datetime.min.replace(tzinfo=UTC) - _EPOCH
) // _ONE_MILLISECOND
MAX_BUILD_DATE_MILLIS: Final = (
    datetime.max.replace(tzinfo=UTC) - _EPOCH
) // _ONE_MILLISECOND


class ProjectVersionRecord(BaseModel):
    """Every stored field of a ProjectVersion.

    Derived values such as the semantic version and the formatted build date
    are not stored; they are recomputed when the record is restored.

    Attributes:
        core_version: Trimmed "major.minor.patch" string as given.
        build_type: Effective build type.
        requested_build_type: Build type that was asked for.
        build_number: "0" for developer builds, otherwise build time millis.
        build_date_millis: Build time as milliseconds since the Unix epoch.
        branch: Git branch or "unknown".
        commit: Git commit hash or "unknown".
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    core_version: str
    build_type: BuildType
    requested_build_type: BuildType
    build_number: str = Field(pattern=r"^\d+$")
    build_date_millis: int = Field(ge=MIN_BUILD_DATE_MILLIS, le=MAX_BUILD_DATE_MILLIS)
    branch: str = Field(min_length=1)
    commit: str = Field(min_length=1)

    @field_validator("core_version")
    @classmethod
    def _check_core_version(cls, value: str) -> str:
        CoreVersion.parse(value)
        return value

    def __str__(self: Self) -> str:
        return f"{self.core_version} ({self.build_type}, #{self.build_number})"
