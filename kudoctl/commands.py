"""Argument and option checks for the get, update, upgrade, package and repo index commands."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from packaging.version import InvalidVersion, Version


class CommandError(ValueError):
    """Raised when a command is given invalid arguments or options."""


def validate_get_args(args: Sequence[str] | None) -> None:
    """The get command takes exactly one argument, ``instances``."""
    args = list(args or [])
    if len(args) != 1:
        raise CommandError('expecting exactly one argument - "instances"')
    if args[0] != "instances":
        raise CommandError(f'expecting "instances" and not "{args[0]}"')


def validate_update(
    args: Sequence[str] | None,
    instance_name: str,
    parameters: Mapping[str, str] | None,
) -> None:
    """Update takes no positional arguments, an instance and at least one parameter."""
    if args:
        raise CommandError(
            "expecting no arguments provided for update. Only named flags are accepted"
        )
    if not instance_name:
        raise CommandError(
            "--instance flag has to be provided to indicate which instance you want to update"
        )
    if not parameters:
        raise CommandError(
            "need to specify at least one parameter to override via -p "
            "otherwise there is nothing to update"
        )


def validate_upgrade(args: Sequence[str] | None, instance_name: str) -> None:
    """Upgrade takes exactly one package argument and an instance name."""
    if len(list(args or [])) != 1:
        raise CommandError(
            "expecting exactly one argument - name of the package or path to upgrade"
        )
    if not instance_name:
        raise CommandError(
            "please use --instance and specify instance name. It cannot be empty"
        )


def _parse_version(text: str) -> Version:
    try:
        return Version(text)
    except InvalidVersion as exc:
        raise CommandError(f"when parsing {text} as semver: {exc}") from exc


def check_upgrade_versions(current: str, new: str) -> None:
    """Raise unless ``new`` is a strictly higher version than ``current``."""
    old_version = _parse_version(current)
    new_version = _parse_version(new)
    if not old_version < new_version:
        raise CommandError(
            f"upgraded version {new} is the same or smaller as current version "
            f"{current} -> not upgrading"
        )


def validate_package_args(args: Sequence[str] | None) -> None:
    """The package command takes exactly one operator directory."""
    if len(list(args or [])) != 1:
        raise CommandError(
            "expecting exactly one argument - directory of the operator to package"
        )


def validate_repo_index(
    args: Sequence[str] | None,
    merge: str = "",
    merge_repo: str = "",
    url: str = "",
    url_repo: str = "",
) -> None:
    """Repo index takes one directory; merge and url options each allow one form."""
    if len(list(args or [])) != 1:
        raise CommandError(
            "expecting exactly one argument - directory containing the operators to package"
        )
    if merge_repo and merge:
        raise CommandError("specify either 'merge' or 'merge-repo', not both")
    if url and url_repo:
        raise CommandError("specify either 'url' or 'url-repo', not both")