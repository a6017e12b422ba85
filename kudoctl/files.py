"""Helpers for working with files and directories."""

from __future__ import annotations

import hashlib
import os
import shutil
from typing import BinaryIO

_CHUNK = 64 * 1024


def full_path_to_target(destination: str, name: str, overwrite: bool) -> str:
    """Return the absolute path of ``name`` inside ``destination``.

    Raises ``NotADirectoryError`` if ``destination`` is not a directory and
    ``FileExistsError`` if the target exists and ``overwrite`` is false.
    """
    if "~" in destination:
        destination = destination.replace("~", os.path.expanduser("~"), 1)
    destination = os.path.abspath(destination)
    if not os.path.isdir(destination):
        raise NotADirectoryError(
            f'destination "{destination}" is not a proper directory'
        )
    target = os.path.join(destination, name)
    if os.path.exists(target) and not overwrite:
        raise FileExistsError(f'target file "{target}" already exists')
    return target


def sha256_sum(stream: BinaryIO) -> str:
    """Return the hex SHA-256 checksum of everything read from ``stream``."""
    digest = hashlib.sha256()
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        digest.update(chunk)
    return digest.hexdigest()


def copy_operator(source: str, base: str) -> str:
    """Copy an operator directory or package file into ``base``.

    The copy is placed at ``base/<name of source>``; its path is returned.
    """
    os.makedirs(base, exist_ok=True)
    target = os.path.join(base, os.path.basename(os.path.normpath(source)))
    if os.path.isdir(source):
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        shutil.copyfile(source, target)
    return target