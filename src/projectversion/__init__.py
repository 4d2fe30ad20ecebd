"""projectversion - semantic project versions with build identification.

A package providing an immutable project version that combines a
major.minor.patch version with the build type, build time, build number and
git branch and commit of the build.
"""

from ._version import __version__
from .build_type import BuildType
from .core_version import CoreVersion
from .environment import BuildEnvironment, is_developer_build
from .exceptions import InvalidVersionError, ProjectVersionError
from .project_version import NO_VERSION, UNKNOWN, BuildOptions, ProjectVersion
from .record import ProjectVersionRecord

__all__ = [
    "NO_VERSION",
    "UNKNOWN",
    "BuildEnvironment",
    "BuildOptions",
    "BuildType",
    "CoreVersion",
    "InvalidVersionError",
    "ProjectVersion",
    "ProjectVersionError",
    "ProjectVersionRecord",
    "__version__",
    "is_developer_build",
]
