from __future__ import annotations
import logging
import os
import pathlib
import subprocess
from typing import List, Tuple

from .errors import RootUnreadableError
from .walk import GIT_DIR, is_dir, list_children

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _dirs_first(entries: List[os.DirEntry]) -> List[os.DirEntry]:
    return [e for e in entries if is_dir(e)] + [e for e in entries if not is_dir(e)]


def generate_tree_fallback(root: pathlib.Path) -> str:
    """tree-like listing: directories first, then files, each group by name."""
    root = pathlib.Path(root)
    lines: List[str] = [root.absolute().name or "repo"]
    try:
        top = _dirs_first(list_children(root))
    except OSError as e:
        raise RootUnreadableError(root, e) from e

    # (entry, prefix, is_last) frames, pushed in reverse so they pop in order
    stack: List[Tuple[os.DirEntry, str, bool]] = []
    stack.extend((e, "", i == len(top) - 1) for i, e in reversed(list(enumerate(top))))
    while stack:
        entry, prefix, last = stack.pop()
        lines.append(prefix + (LAST_BRANCH if last else BRANCH) + entry.name)
        if not is_dir(entry):
            continue
        try:
            children = _dirs_first(list_children(entry.path))
        except OSError as e:
            logger.warning("cannot list %s: %s", entry.path, e)
            continue
        child_prefix = prefix + (SPACE if last else PIPE)
        stack.extend(
            (c, child_prefix, i == len(children) - 1) for i, c in reversed(list(enumerate(children)))
        )
    return "\n".join(lines)


def try_tree_command(root: pathlib.Path) -> str:
    cp = subprocess.run(
        ["tree", "-a", "--dirsfirst", "--noreport", "-I", GIT_DIR, "."],
        cwd=str(root), check=True, text=True, capture_output=True,
    )
    return cp.stdout.rstrip("\n")


def generate_tree(root: pathlib.Path, prefer_external: bool = False) -> str:
    """Directory listing of ``root``, independent of render decisions.

    With ``prefer_external`` the system ``tree`` command is tried first; the
    built-in renderer is used whenever it is missing or fails.
    """
    if prefer_external:
        try:
            return try_tree_command(root)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("tree command unavailable (%s), using built-in renderer", e)
    return generate_tree_fallback(root)
