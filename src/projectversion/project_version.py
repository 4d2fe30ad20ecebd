"""ProjectVersion class."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar, Final, Self

from pydantic import BaseModel, ConfigDict

from .build_type import BuildType
from .core_version import CoreVersion
from .environment import BuildEnvironment
from .environment import is_developer_build as _is_developer_build
from .record import ProjectVersionRecord

logger = logging.getLogger(__name__)

UNKNOWN: Final = "unknown"

_EPOCH: Final = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND: Final = timedelta(milliseconds=1)
_BUILD_DATE_FORMAT: Final = "%Y-%m-%dT%H:%M:%SZ"


class BuildOptions(BaseModel):
    """Optional inputs to a ProjectVersion.

    Fields that are left unset are defaulted when the version is constructed:
    the build time to the current time, the branch and commit to the GIT_BRANCH
    and GIT_COMMIT signals of the environment, and the environment to the
    process environment. A branch or commit explicitly set to None is not
    looked up in the environment; it becomes "unknown".

    Attributes:
        build_time: Time of the build. Naive datetimes are taken to be UTC.
        branch: Git branch the version is built from.
        commit: Git commit hash the version is built from.
        environment: Build environment signals.

    Example:
        >>> options = BuildOptions(branch="master", commit="a5b7f46")
        >>> "build_time" in options.model_fields_set
        False
    """

    model_config = ConfigDict(frozen=True)

    build_time: datetime | None = None
    branch: str | None = None
    commit: str | None = None
    environment: BuildEnvironment | None = None


def _to_epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - _EPOCH) // _ONE_MILLISECOND


def _format_build_date(millis: int) -> str:
    return (_EPOCH + timedelta(milliseconds=millis)).strftime(_BUILD_DATE_FORMAT)


def _or_unknown(value: str | None) -> str:
    if value is None or not value.strip():
        return UNKNOWN
    return value


class ProjectVersion:
    """A semantic version with build identification information.

    The build environment decides how the requested build type is honored:

    ==================  ==============  ============  ====================
    Environment         Requested type  Actual type   Semantic version
    ==================  ==============  ============  ====================
    CTHING_CI set       snapshot        snapshot      n.n.n-t (t = millis)
    CTHING_CI unset     snapshot        snapshot      n.n.n-0
    CTHING_CI set       release         release       n.n.n
    CTHING_CI unset     release         snapshot      n.n.n-0
    ==================  ==============  ============  ====================

    Instances are immutable. Equality looks at the version numbers, the build
    number and the build type only; ordering sorts by version numbers, then
    puts release builds after snapshots and orders snapshots by build time.

    Example:
        >>> env = BuildEnvironment(ci="true")
        >>> built = datetime(2024, 5, 23, tzinfo=UTC)
        >>> version = ProjectVersion(
        ...     "1.2.3",
        ...     BuildType.snapshot,
        ...     BuildOptions(build_time=built, environment=env),
        ... )
        >>> str(version)
        '1.2.3-1716422400000'
    """

    NO_VERSION: ClassVar["ProjectVersion"]

    __slots__ = (
        "_branch",
        "_build_date",
        "_build_date_millis",
        "_build_number",
        "_build_type",
        "_commit",
        "_core",
        "_core_text",
        "_requested_build_type",
        "_semantic_version",
    )

    def __init__(
        self: Self,
        core_version: str,
        build_type: BuildType | str = BuildType.snapshot,
        options: BuildOptions | None = None,
    ) -> None:
        """Construct a version.

        Args:
            core_version: Major, minor and patch version (e.g. "1.2.3").
            build_type: Requested type of build.
            options: Build time, branch, commit and environment. Unset fields
                are defaulted as described on BuildOptions.

        Raises:
            InvalidVersionError: If the core version is blank or not three
                dot-separated non-negative integers.
            ValueError: If the build type is not a known BuildType.
        """
        core = CoreVersion.parse(core_version)
        requested = BuildType(build_type)
        opts = options if options is not None else BuildOptions()
        env = (
            opts.environment
            if opts.environment is not None
            else BuildEnvironment.from_env()
        )

        build_time = opts.build_time
        if build_time is None:
            build_time = datetime.now(UTC)

        explicit = opts.model_fields_set
        branch = opts.branch if "branch" in explicit else env.git_branch
        commit = opts.commit if "commit" in explicit else env.git_commit

        millis = _to_epoch_millis(build_time)
        if env.is_developer_build:
            if requested is BuildType.release:
                logger.debug(
                    "Developer build of %s: release requested, building snapshot",
                    core,
                )
            effective = BuildType.snapshot
            build_number = "0"
        else:
            effective = requested
            build_number = str(millis)

        self._assign(
            core_version.strip(),
            core,
            requested,
            effective,
            build_number,
            millis,
            _or_unknown(branch),
            _or_unknown(commit),
        )

    def _assign(  # noqa: PLR0913
        self: Self,
        core_text: str,
        core: CoreVersion,
        requested: BuildType,
        effective: BuildType,
        build_number: str,
        millis: int,
        branch: str,
        commit: str,
    ) -> None:
        semantic = core_text
        if effective is BuildType.snapshot:
            semantic = f"{core_text}-{build_number}"

        setter = object.__setattr__
        setter(self, "_core_text", core_text)
        setter(self, "_core", core)
        setter(self, "_requested_build_type", requested)
        setter(self, "_build_type", effective)
        setter(self, "_build_number", build_number)
        setter(self, "_build_date_millis", millis)
        setter(self, "_build_date", _format_build_date(millis))
        setter(self, "_branch", branch)
        setter(self, "_commit", commit)
        setter(self, "_semantic_version", semantic)

    @classmethod
    def from_record(cls, record: ProjectVersionRecord) -> Self:
        """Restore a version from its record.

        The environment and clock are not consulted; every stored field is
        taken from the record. A blank branch or commit becomes "unknown".

        Args:
            record: Record produced by to_record().

        Returns:
            Restored ProjectVersion.
        """
        version = cls.__new__(cls)
        version._assign(
            record.core_version.strip(),
            CoreVersion.parse(record.core_version),
            record.requested_build_type,
            record.build_type,
            record.build_number,
            record.build_date_millis,
            _or_unknown(record.branch),
            _or_unknown(record.commit),
        )
        return version

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Restore a version from the JSON form of its record.

        Raises:
            pydantic.ValidationError: If the JSON is not a valid record.
        """
        return cls.from_record(ProjectVersionRecord.model_validate_json(data))

    def to_record(self: Self) -> ProjectVersionRecord:
        """Capture every stored field of this version.

        Returns:
            Record that from_record() turns back into an equal version.
        """
        return ProjectVersionRecord(
            core_version=self._core_text,
            build_type=self._build_type,
            requested_build_type=self._requested_build_type,
            build_number=self._build_number,
            build_date_millis=self._build_date_millis,
            branch=self._branch,
            commit=self._commit,
        )

    def to_json(self: Self, indent: int | None = None) -> str:
        """Serialize this version's record as JSON."""
        return self.to_record().model_dump_json(indent=indent)

    @staticmethod
    def is_developer_build(environment: BuildEnvironment | None = None) -> bool:
        """Check whether a build is taking place on a developer's machine.

        Args:
            environment: Environment to check. Defaults to the process
                environment.

        Returns:
            True if the CI indicator is absent or blank.
        """
        return _is_developer_build(environment)

    @property
    def semantic_version(self: Self) -> str:
        """Complete version, e.g. "1.2.3-1716422556680" for a snapshot."""
        return self._semantic_version

    @property
    def core_version(self: Self) -> str:
        """Major, minor and patch version without a pre-release suffix."""
        return self._core_text

    @property
    def major_version(self: Self) -> int:
        return self._core.major

    @property
    def minor_version(self: Self) -> int:
        return self._core.minor

    @property
    def patch_version(self: Self) -> int:
        return self._core.patch

    @property
    def build_number(self: Self) -> str:
        """Build number; "0" for developer builds, else the build time in millis."""
        return self._build_number

    @property
    def build_type(self: Self) -> BuildType:
        """Effective build type after the environment has been applied."""
        return self._build_type

    @property
    def requested_build_type(self: Self) -> BuildType:
        return self._requested_build_type

    @property
    def is_release_build(self: Self) -> bool:
        return self._build_type is BuildType.release

    @property
    def is_snapshot_build(self: Self) -> bool:
        return self._build_type is BuildType.snapshot

    @property
    def build_date(self: Self) -> str:
        """Build time in UTC, formatted as YYYY-MM-DDTHH:MM:SSZ."""
        return self._build_date

    @property
    def build_date_millis(self: Self) -> int:
        """Build time as milliseconds since the Unix epoch."""
        return self._build_date_millis

    @property
    def branch(self: Self) -> str:
        """Git branch name or "unknown"."""
        return self._branch

    @property
    def commit(self: Self) -> str:
        """Git commit hash or "unknown"."""
        return self._commit

    def compare_to(self: Self, other: "ProjectVersion") -> int:
        """Order this version relative to another.

        Versions are ordered by major, minor and patch. With equal numbers a
        release build is greater than a snapshot build, two release builds are
        equal regardless of when they were built, and two snapshot builds are
        ordered by build time.

        Args:
            other: Version to compare with.

        Returns:
            -1, 0 or 1 as this version is less than, equal to or greater than
            the other.
        """
        if self._core != other._core:
            return -1 if self._core < other._core else 1

        if self.is_release_build and other.is_release_build:
            return 0
        if self.is_release_build:
            return 1
        if other.is_release_build:
            return -1

        return (self._build_date_millis > other._build_date_millis) - (
            self._build_date_millis < other._build_date_millis
        )

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, ProjectVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, ProjectVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, ProjectVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, ProjectVersion):
            return NotImplemented
        return self.compare_to(other) >= 0

    def _identity(self: Self) -> tuple[int, int, int, str, BuildType]:
        return (
            self._core.major,
            self._core.minor,
            self._core.patch,
            self._build_number,
            self._build_type,
        )

    def __eq__(self: Self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self: Self) -> int:
        return hash(self._identity())

    def __setattr__(self: Self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self: Self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self: Self) -> tuple[Any, ...]:
        return _restore, (type(self), self.to_record().model_dump())

    def __str__(self: Self) -> str:
        """Return the semantic version."""
        return self._semantic_version

    def __repr__(self: Self) -> str:
        return (
            f"ProjectVersion({self._semantic_version!r}, "
            f"build_type={self._build_type.value!r}, "
            f"branch={self._branch!r}, commit={self._commit!r})"
        )


def _restore(cls: type[ProjectVersion], state: dict[str, Any]) -> ProjectVersion:
    return cls.from_record(ProjectVersionRecord.model_validate(state))


NO_VERSION: Final = ProjectVersion.from_record(
    ProjectVersionRecord(
        core_version="0.0.0",
        build_type=BuildType.snapshot,
        requested_build_type=BuildType.snapshot,
        build_number="0",
        build_date_millis=0,
        branch=UNKNOWN,
        commit=UNKNOWN,
    )
)
"""Version indicating that no version has been specified."""

ProjectVersion.NO_VERSION = NO_VERSION
