"""
Getting a tree onto disk: a local directory used in place, or a git clone
(optionally at a given branch, tag or commit).
"""

from __future__ import annotations
import logging
import pathlib
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from .errors import AcquisitionError

logger = logging.getLogger(__name__)

UNKNOWN_REVISION = "(unknown)"


@dataclass(frozen=True)
class AcquiredTree:
    root: pathlib.Path
    revision: str
    display: str  # source identifier shown in the page


def run(cmd: List[str], cwd: str | None = None, check: bool = True) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, cwd=cwd, check=check, text=True, capture_output=True)


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://", "ssh://", "git://", "file://")) or (
        "@" in source and ":" in source and not pathlib.Path(source).exists()
    )


def git_clone(url: str, dst: str, ref: Optional[str] = None) -> None:
    if ref is None:
        run(["git", "clone", "--depth", "1", url, dst])
        return
    try:
        run(["git", "clone", "--depth", "1", "--branch", ref, url, dst])
        return
    except subprocess.CalledProcessError as e:
        # --branch only takes branch and tag names; retry for commit ids
        logger.debug("shallow clone of %s at %s failed: %s", url, ref, e.stderr)
    run(["git", "clone", url, dst])
    run(["git", "checkout", "--quiet", ref], cwd=dst)


def git_head_commit(repo_dir: str) -> str:
    try:
        cp = run(["git", "rev-parse", "HEAD"], cwd=repo_dir)
        return cp.stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        return UNKNOWN_REVISION


def acquire(source: str, workdir: pathlib.Path, ref: Optional[str] = None) -> AcquiredTree:
    """Materialize ``source`` as a directory tree.

    A local directory without ``ref`` is used in place. Everything else is
    cloned into ``workdir / "repo"``; the caller owns ``workdir``.
    """
    local = pathlib.Path(source).expanduser()
    if local.is_dir() and ref is None:
        root = local.resolve()
        return AcquiredTree(root, git_head_commit(str(root)), f"file://{root}")

    if local.is_dir():
        url = str(local.resolve())
        display = f"file://{url}"
    elif is_remote(source):
        url = display = source
    else:
        raise AcquisitionError(source, "not a directory or a git URL")

    repo_dir = pathlib.Path(workdir, "repo")
    try:
        git_clone(url, str(repo_dir), ref)
    except subprocess.CalledProcessError as e:
        raise AcquisitionError(source, e.stderr or str(e)) from e
    except FileNotFoundError as e:
        raise AcquisitionError(source, "git executable not found") from e
    return AcquiredTree(repo_dir, git_head_commit(str(repo_dir)), display)


def short_revision(revision: str) -> str:
    return revision if revision == UNKNOWN_REVISION else revision[:8]
