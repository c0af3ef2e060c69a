from pathlib import Path

import pytest

from easycopy.content import SyntaxAssets


def make_file(p: Path, content="x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        p.write_bytes(content)
    else:
        p.write_text(content, encoding="utf-8")
    return p


@pytest.fixture(scope="session")
def assets():
    return SyntaxAssets.load()


@pytest.fixture
def sample_repo(tmp_path):
    """a.md, b.py, img.png and an oversized big.txt under a 100-byte threshold."""
    root = tmp_path / "sample"
    make_file(root / "a.md", "# Hi")
    make_file(root / "b.py", "print(1)")
    make_file(root / "img.png", b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    make_file(root / "big.txt", "y" * 500)
    return root
