"""The ``init`` command: option checks and rendering of the install manifests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from kudoctl.crds import crd_manifests
from kudoctl.manager import manager_manifests
from kudoctl.prereqs import Options, new_options, prereq_manifests

DEFAULT_WAIT_TIMEOUT = 300


class InitError(ValueError):
    """Raised when the init command is given an invalid combination of options."""


def yaml_writer(out: TextIO, manifests: list[str]) -> None:
    """Write manifests as a multi-document YAML stream, closed by ``...``."""
    for manifest in manifests:
        out.write("---\n")
        out.write(f"{manifest}\n")
    out.write("...\n")


@dataclass
class InitCommand:
    """Options of the init command and the manifests they produce."""

    image: str = ""
    version: str = ""
    output: str = ""
    dry_run: bool = False
    wait: bool = False
    timeout: int = DEFAULT_WAIT_TIMEOUT
    client_only: bool = False
    crd_only: bool = False

    def validate(self, args: list[str] | None = None) -> None:
        """Reject positional arguments and conflicting options."""
        if args:
            raise InitError("this command does not accept arguments")
        if self.image and self.version:
            raise InitError("specify either 'kudo-image' or 'version', not both")
        if self.crd_only and self.wait:
            raise InitError("wait is not allowed with crd-only")

    def options(self) -> Options:
        """Install options, with the image override applied if one was given."""
        opts = new_options(self.version)
        if self.image:
            opts.image = self.image
        return opts

    def manifests(self) -> list[str]:
        """The YAML documents this command would install.

        With ``crd_only`` these are the CRDs alone; otherwise the prerequisites
        followed by the manager service and stateful set.
        """
        if self.crd_only:
            return crd_manifests()
        opts = self.options()
        return prereq_manifests(opts) + manager_manifests(opts)

    def render(self, out: TextIO) -> bool:
        """Write the manifests to ``out`` if YAML output was asked for.

        Returns whether anything was written.
        """
        if self.output.lower() != "yaml":
            return False
        yaml_writer(out, self.manifests())
        return True