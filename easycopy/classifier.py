"""
Walk a tree and decide, file by file, whether its content gets rendered.

Decisions are evaluated in order, first match wins:
  ignored    -> the path sits under a ``.git`` segment
  too_large  -> size > max_bytes
  binary     -> known binary extension, NUL byte or invalid UTF-8 in the
                first SNIFF_BYTES bytes
  ok         -> everything else
"""

from __future__ import annotations
import codecs
import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Callable, List, Optional

from .errors import InvalidThresholdError, RootUnreadableError
from .walk import GIT_DIR, is_dir, is_regular_file, list_children

logger = logging.getLogger(__name__)

MAX_DEFAULT_BYTES = 50 * 1024
SNIFF_BYTES = 8192
BINARY_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp", ".svg", ".ico",
    ".pdf", ".zip", ".tar", ".gz", ".bz2", ".xz", ".7z", ".rar",
    ".mp3", ".mp4", ".mov", ".avi", ".mkv", ".wav", ".ogg", ".flac",
    ".ttf", ".otf", ".eot", ".woff", ".woff2",
    ".so", ".dll", ".dylib", ".class", ".jar", ".exe", ".bin",
}

OK = "ok"
BINARY = "binary"
TOO_LARGE = "too_large"
IGNORED = "ignored"


@dataclass(frozen=True)
class RenderDecision:
    include: bool
    reason: str  # "ok" | "binary" | "too_large" | "ignored"


@dataclass(frozen=True)
class FileInfo:
    path: pathlib.Path  # absolute path on disk
    rel: str            # path relative to repo root (slash-separated)
    size: int
    decision: RenderDecision


@dataclass(frozen=True)
class Summary:
    total: int
    rendered: int
    binary: int
    too_large: int
    ignored: int

    @property
    def skipped(self) -> int:
        # ignored files only count towards the total
        return self.binary + self.too_large


def is_ignored(rel: str) -> bool:
    return GIT_DIR in rel.split("/")[:-1]


def _is_valid_utf8(chunk: bytes, complete: bool) -> bool:
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        # A full sniff may end inside a multi-byte character.
        decoder.decode(chunk, final=complete)
    except UnicodeDecodeError:
        return False
    return True


def looks_binary(path: pathlib.Path) -> bool:
    if path.suffix.lower() in BINARY_EXTENSIONS:
        return True
    try:
        with path.open("rb") as f:
            chunk = f.read(SNIFF_BYTES)
    except OSError as e:
        # Unreadable now; the renderer reports it when it tries again.
        logger.debug("cannot sniff %s: %s", path, e)
        return False
    if b"\x00" in chunk:
        return True
    return not _is_valid_utf8(chunk, complete=len(chunk) < SNIFF_BYTES)


def decide_file(path: pathlib.Path, repo_root: pathlib.Path, max_bytes: int, size: Optional[int] = None) -> FileInfo:
    rel = path.relative_to(repo_root).as_posix()
    if size is None:
        try:
            size = path.stat().st_size
        except OSError:
            size = 0
    if is_ignored(rel):
        return FileInfo(path, rel, size, RenderDecision(False, IGNORED))
    if size > max_bytes:
        return FileInfo(path, rel, size, RenderDecision(False, TOO_LARGE))
    if looks_binary(path):
        return FileInfo(path, rel, size, RenderDecision(False, BINARY))
    return FileInfo(path, rel, size, RenderDecision(True, OK))


def _check_threshold(max_bytes) -> None:
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 0:
        raise InvalidThresholdError(max_bytes)


def collect_files(
    repo_root: pathlib.Path,
    max_bytes: int = MAX_DEFAULT_BYTES,
    progress: Optional[Callable[[FileInfo], None]] = None,
) -> List[FileInfo]:
    """Classify every regular file under ``repo_root``, sorted by ``rel``.

    Raises RootUnreadableError if the root itself cannot be listed. Unreadable
    sub-directories are skipped with a warning.
    """
    _check_threshold(max_bytes)
    repo_root = pathlib.Path(repo_root).absolute()
    try:
        top = list_children(repo_root)
    except OSError as e:
        raise RootUnreadableError(repo_root, e) from e

    infos: List[FileInfo] = []
    pending = [top]
    while pending:
        for entry in pending.pop():
            if is_dir(entry):
                try:
                    pending.append(list_children(entry.path))
                except OSError as e:
                    logger.warning("skipping unreadable directory %s: %s", entry.path, e)
            elif is_regular_file(entry):
                try:
                    size = entry.stat(follow_symlinks=False).st_size
                except OSError:
                    size = 0
                info = decide_file(pathlib.Path(entry.path), repo_root, max_bytes, size=size)
                infos.append(info)
                if progress is not None:
                    progress(info)

    # byte order of the path, also for names that are not valid UTF-8
    infos.sort(key=lambda i: os.fsencode(i.rel))
    return infos


def summarize(infos: List[FileInfo]) -> Summary:
    reasons = [i.decision.reason for i in infos]
    return Summary(
        total=len(infos),
        rendered=reasons.count(OK),
        binary=reasons.count(BINARY),
        too_large=reasons.count(TOO_LARGE),
        ignored=reasons.count(IGNORED),
    )
