"""Listing the entries of a directory."""

from __future__ import annotations

import os
import sys
from os import PathLike

_SELF_AND_PARENT = (os.curdir, os.pardir)


def list_directory(path: str | PathLike[str]) -> list[str]:
    """Return the names of the entries of ``path``.

    Like a raw directory read, the list starts with the entries for the
    directory itself and its parent.

    Raises ``OSError`` when the directory cannot be opened.
    """
    with os.scandir(path) as entries:
        names = [entry.name for entry in entries]
    return [*_SELF_AND_PARENT, *names]


def main(argv: list[str] | None = None) -> int:
    """Print the entries of the directory named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Utilisation : colorcast-ls <nom_du_repertoire>")
        return 1
    try:
        names = list_directory(args[0])
    except OSError as exc:
        print(f"Erreur lors de l'ouverture du répertoire: {exc}", file=sys.stderr)
        return 0
    for name in names:
        print(name)
    return 0