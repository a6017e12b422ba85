"""Global settings, taken from command line flags and the environment."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

# Flag names mapped to the environment variables that back them.
ENV_MAP = {
    "home": "KUDO_HOME",
    "kubeconfig": "KUBECONFIG",
}

DEFAULT_NAMESPACE = "default"


@dataclass
class Settings:
    """Settings shared by every command."""

    kube_config: str = ""
    home: str = ""
    namespace: str = DEFAULT_NAMESPACE


def default_kudo_home() -> str:
    """Return the default KUDO home directory, ``~/.kudo``."""
    return os.path.join(os.path.expanduser("~"), ".kudo")


def add_flags(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the global flags to ``parser``.

    ``--home`` and ``--kubeconfig`` default to ``None`` so that an unset flag
    can be told apart from one given explicitly.
    """
    parser.add_argument(
        "--home", dest="home", default=None, help="location of your KUDO config."
    )
    parser.add_argument(
        "--kubeconfig",
        dest="kubeconfig",
        default=None,
        help="Path to your Kubernetes configuration file.",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        dest="namespace",
        default=DEFAULT_NAMESPACE,
        help="Target namespace for the object.",
    )
    return parser


def load_settings(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """Build settings from flags, falling back to the environment, then defaults."""
    env = os.environ if environ is None else environ
    args = sys.argv[1:] if argv is None else list(argv)

    parser = add_flags(argparse.ArgumentParser(add_help=False))
    parsed, _ = parser.parse_known_args(args)

    defaults = {
        "home": default_kudo_home(),
        "kubeconfig": env.get("HOME", "") + "/.kube/config",
    }
    values: dict[str, str] = {}
    for name, variable in ENV_MAP.items():
        given = getattr(parsed, name)
        if given is not None:
            values[name] = given
        elif variable in env:
            values[name] = env[variable]
        else:
            values[name] = defaults[name]

    return Settings(
        kube_config=values["kubeconfig"],
        home=values["home"],
        namespace=parsed.namespace,
    )