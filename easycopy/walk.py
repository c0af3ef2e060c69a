"""
The single directory-listing primitive shared by the classifier and the tree
renderer, so both agree on what is part of the tree.
"""

from __future__ import annotations
import os
from typing import List

GIT_DIR = ".git"


def list_children(dir_path: str | os.PathLike) -> List[os.DirEntry]:
    """List a directory's children sorted by name.

    Symbolic links and anything named ``.git`` are dropped. Raises ``OSError``
    if the directory cannot be listed.
    """
    with os.scandir(dir_path) as it:
        entries = [e for e in it if e.name != GIT_DIR and not e.is_symlink()]
    entries.sort(key=lambda e: e.name)
    return entries


def is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False
