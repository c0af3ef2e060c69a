"""
easycopy: flatten a repository into a single static HTML page for fast
skimming and Ctrl+F, with a CXML view for pasting into an LLM.

Usage
    easycopy https://github.com/user/repo -o out.html
    easycopy path/to/local/repo --cxml-out repo.xml --no-open
"""

from __future__ import annotations
import argparse
import logging
import pathlib
import shutil
import sys
import tempfile
import webbrowser
from typing import List, Optional

from tqdm import tqdm

from . import __version__
from .classifier import MAX_DEFAULT_BYTES
from .document import render_repository
from .errors import EasycopyError
from .git_ops import acquire, short_revision
from .utils import bytes_human, derive_temp_output_path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="easycopy",
        description="Flatten a GitHub repo (or local directory) into a single static HTML page",
    )
    ap.add_argument("source", help="Git URL (https://github.com/owner/repo[.git]) or local directory")
    ap.add_argument("-o", "--out", help="Output HTML file path (default: temporary file derived from repo name)")
    ap.add_argument("--cxml-out", help="Also write the CXML (LLM) view to this path")
    ap.add_argument("--max-bytes", type=int, default=MAX_DEFAULT_BYTES, help="Max file size to render (bytes); larger files are listed but skipped")
    ap.add_argument("--ref", help="Branch, tag or commit to check out")
    ap.add_argument("--no-open", action="store_true", help="Don't open the HTML file in browser after generation")
    ap.add_argument("--no-progress", action="store_true", help="Don't show a progress bar while scanning")
    ap.add_argument("--system-tree", action="store_true", help="Use the `tree` command for the directory listing when available")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def write_text(path: pathlib.Path, text: str) -> None:
    # File names that are not valid UTF-8 must not abort the write.
    path.write_text(text, encoding="utf-8", errors="replace")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_path = pathlib.Path(args.out) if args.out else derive_temp_output_path(args.source)
    tmpdir = tempfile.mkdtemp(prefix="easycopy_")

    try:
        print(f"📁 Preparing {args.source}", file=sys.stderr)
        tree = acquire(args.source, pathlib.Path(tmpdir), ref=args.ref)
        print(f"✓ Source ready at {tree.root} (HEAD: {short_revision(tree.revision)})", file=sys.stderr)

        print(f"📊 Scanning files in {tree.root}...", file=sys.stderr)
        with tqdm(unit="file", file=sys.stderr, disable=args.no_progress, leave=False) as pbar:
            artifacts = render_repository(
                tree.root,
                source=tree.display,
                revision=tree.revision,
                max_bytes=args.max_bytes,
                prefer_external_tree=args.system_tree,
                progress=lambda info: pbar.update(1),
            )
        s = artifacts.summary
        print(f"✓ Found {s.total} files total ({s.rendered} rendered, {s.skipped} skipped)", file=sys.stderr)

        print(f"💾 Writing HTML file: {out_path.resolve()}", file=sys.stderr)
        write_text(out_path, artifacts.html)
        print(f"✓ Wrote {bytes_human(out_path.stat().st_size)} to {out_path}", file=sys.stderr)

        if args.cxml_out:
            cxml_path = pathlib.Path(args.cxml_out)
            write_text(cxml_path, artifacts.cxml)
            print(f"✓ Wrote CXML view ({bytes_human(cxml_path.stat().st_size)}) to {cxml_path}", file=sys.stderr)

        if not args.no_open:
            print(f"🌐 Opening {out_path} in browser...", file=sys.stderr)
            webbrowser.open(out_path.resolve().as_uri())
        return 0
    except EasycopyError as e:
        print(f"❌ {e}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


if __name__ == "__main__":
    raise SystemExit(main())
