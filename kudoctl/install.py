"""Argument, parameter and override checks for the ``install`` command."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from kudoctl.prereqs import Manifest


class InstallError(ValueError):
    """Raised when an installation cannot go ahead as requested."""


@dataclass
class InstallOptions:
    """Options of the install command."""

    repo_name: str = ""
    instance_name: str = ""
    parameters: dict[str, str] | None = None
    package_version: str = ""
    skip_instance: bool = False


def validate_install_args(args: Sequence[str] | None) -> None:
    """Install takes exactly one package name or path."""
    if len(list(args or [])) != 1:
        raise InstallError(
            "expecting exactly one argument - name of the package or path to install"
        )


def validate_crds(
    parameters: Iterable[Mapping[str, Any]],
    instance_parameters: Mapping[str, str] | None,
    skip_instance: bool,
) -> None:
    """Check that every required parameter without a default is given.

    ``parameters`` are the operator version's parameter definitions, each with
    ``name`` and optionally ``required`` and ``default``. Nothing is checked
    when no instance is to be created.
    """
    if skip_instance:
        return
    given = instance_parameters or {}
    missing = [
        p["name"]
        for p in parameters
        if p.get("required") and p.get("default") is None and p["name"] not in given
    ]
    if missing:
        raise InstallError(
            "missing required parameters during installation: " + ",".join(missing)
        )


def version_exists(versions: Iterable[str], current: str) -> bool:
    """Whether ``current`` is among ``versions``."""
    return current in versions


def apply_instance_overrides(instance: Manifest, options: InstallOptions) -> Manifest:
    """Return a copy of the instance manifest with command line overrides applied.

    A non-empty instance name replaces ``metadata.name``; parameters, when given,
    replace ``spec.parameters`` as a whole.
    """
    result = copy.deepcopy(instance)
    if options.instance_name:
        result.setdefault("metadata", {})["name"] = options.instance_name
    if options.parameters is not None:
        result.setdefault("spec", {})["parameters"] = dict(options.parameters)
    return result