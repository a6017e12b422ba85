"""Parsing of ``key=value`` parameters given on the command line."""

from __future__ import annotations

from collections.abc import Iterable


class ParameterError(ValueError):
    """Raised when one or more command line parameters are malformed."""


def parse_parameter(raw: str) -> tuple[str, str]:
    """Split a single ``key=value`` parameter into its key and value."""
    key, sep, value = raw.partition("=")
    if not sep:
        raise ParameterError(f"parameter not set: {raw}")
    if not key:
        raise ParameterError(f"parameter name can not be empty: {raw}")
    if not value:
        raise ParameterError(f"parameter value can not be empty: {raw}")
    return key, value


def get_parameter_map(raw: Iterable[str]) -> dict[str, str]:
    """Parse parameter strings into a mapping; report every bad entry at once."""
    errors: list[str] = []
    parameters: dict[str, str] = {}
    for item in raw:
        try:
            key, value = parse_parameter(item)
        except ParameterError as exc:
            errors.append(str(exc))
            continue
        parameters[key] = value
    if errors:
        raise ParameterError(", ".join(errors))
    return parameters