"""Argument helpers shared by commands."""

from nodever.core.errors import MissingArgument
from nodever.core.semver import VersionId, parse_user_version


def require_version(value: str | None, command: str) -> VersionId:
    """Parse a required version argument.

    Raises:
        MissingArgument: If value was not given
        InvalidVersion: If value is not a version identifier
    """
    if not value:
        raise MissingArgument(
            f"'{command}' requires a version",
            hint=f"usage: nodever {command} <version>",
        )
    return parse_user_version(value)


def require_versions(values: tuple[str, ...], command: str) -> list[VersionId]:
    """Parse one or more version arguments.

    Raises:
        MissingArgument: If no values were given
        InvalidVersion: If any value is not a version identifier
    """
    if not values:
        raise MissingArgument(
            f"'{command}' requires at least one version",
            hint=f"usage: nodever {command} <version...>",
        )
    return [parse_user_version(value) for value in values]
