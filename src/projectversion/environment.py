"""Build environment signals.

The build environment tells a version whether it is being built by the
continuous integration service or on a developer's machine, and which git
branch and commit it is built from. The signals come from environment
variables, captured once into a :class:`BuildEnvironment` value so that
versions can be constructed against any environment without touching the
process environment.
"""

import os
from collections.abc import Mapping
from typing import Final, Self

from pydantic import BaseModel, ConfigDict

CI_ENV_VAR: Final = "CTHING_CI"
BRANCH_ENV_VAR: Final = "GIT_BRANCH"
COMMIT_ENV_VAR: Final = "GIT_COMMIT"


class BuildEnvironment(BaseModel):
    """Snapshot of the environment signals a version is built under.

    Attributes:
        ci: Value of the CI indicator. A non-blank value marks a CI build.
        git_branch: Branch the build is taken from, if known.
        git_commit: Commit hash the build is taken from, if known.

    Example:
        >>> env = BuildEnvironment(ci="true", git_branch="master")
        >>> env.is_ci_build
        True
    """

    model_config = ConfigDict(frozen=True)

    ci: str | None = None
    git_branch: str | None = None
    git_commit: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Read the build environment signals.

        Args:
            environ: Mapping to read the variables from. Defaults to the
                process environment.

        Returns:
            BuildEnvironment holding the CTHING_CI, GIT_BRANCH and GIT_COMMIT
            values.
        """
        source = os.environ if environ is None else environ
        return cls(
            ci=source.get(CI_ENV_VAR),
            git_branch=source.get(BRANCH_ENV_VAR),
            git_commit=source.get(COMMIT_ENV_VAR),
        )

    @property
    def is_ci_build(self: Self) -> bool:
        """Whether the build is performed by the CI service."""
        return self.ci is not None and bool(self.ci.strip())

    @property
    def is_developer_build(self: Self) -> bool:
        """Whether the build is taking place on a developer's machine."""
        return not self.is_ci_build


def is_developer_build(environment: BuildEnvironment | None = None) -> bool:
    """Check whether a build is taking place on a developer's machine.

    Args:
        environment: Environment to check. Defaults to the process environment.

    Returns:
        True if the CI indicator is absent or blank.
    """
    env = BuildEnvironment.from_env() if environment is None else environment
    return env.is_developer_build
