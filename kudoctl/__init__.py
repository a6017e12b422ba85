"""Offline KUDO tooling: parameter parsing, settings, init manifests and command checks."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "crds",
    "env",
    "files",
    "initcmd",
    "install",
    "manager",
    "params",
    "prereqs",
]