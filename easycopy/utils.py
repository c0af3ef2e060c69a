from __future__ import annotations
import pathlib
import tempfile


def bytes_human(n: int) -> str:
    """Human-readable bytes: 1 decimal for KiB and above, integer for B."""
    units = ["B", "KiB", "MiB", "GiB", "TiB"]
    f = float(n)
    i = 0
    while f >= 1024.0 and i < len(units) - 1:
        f /= 1024.0
        i += 1
    if i == 0:
        return f"{int(f)} {units[i]}"
    else:
        return f"{f:.1f} {units[i]}"


def slugify(path_str: str) -> str:
    # Keep alnum, dash, underscore; replace others with '-'. Not injective:
    # "a.b" and "a/b" both become "a-b".
    out = []
    for ch in path_str:
        if ch.isalnum() or ch in {"-", "_"}:
            out.append(ch)
        else:
            out.append("-")
    return "".join(out)


def derive_repo_name(source: str) -> str:
    """Repository name from a URL or path: last segment without ``.git``.

    A local directory is resolved first, so ``.`` names the current directory.
    """
    local = pathlib.Path(source).expanduser()
    if source and local.is_dir():
        name = local.resolve().name
    else:
        name = source.rstrip("/").replace("\\", "/").split("/")[-1]
    if name.endswith(".git"):
        name = name[:-4]
    return name or "repo"


def derive_temp_output_path(source: str) -> pathlib.Path:
    """Default output path: ``<tmpdir>/<repo name>.html``."""
    return pathlib.Path(tempfile.gettempdir()) / f"{derive_repo_name(source)}.html"
