import re
import tempfile

from easycopy import __version__
from easycopy.cli import main

import pytest


def test_writes_html_and_cxml(sample_repo, tmp_path, capsys):
    out = tmp_path / "out.html"
    cxml = tmp_path / "out.xml"
    rc = main([str(sample_repo), "-o", str(out), "--cxml-out", str(cxml),
               "--max-bytes", "100", "--no-open", "--no-progress"])
    assert rc == 0

    page = out.read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html>")
    assert "<h1>Hi</h1>" in page

    dump = cxml.read_text(encoding="utf-8")
    assert re.findall(r"<source>(.*?)</source>", dump) == ["a.md", "b.py"]

    err = capsys.readouterr().err
    assert "Found 4 files total (2 rendered, 2 skipped)" in err


def test_missing_source(tmp_path, capsys):
    rc = main([str(tmp_path / "nope"), "-o", str(tmp_path / "o.html"), "--no-open", "--no-progress"])
    assert rc == 3
    assert "Failed to acquire" in capsys.readouterr().err
    assert not (tmp_path / "o.html").exists()


def test_negative_threshold(sample_repo, tmp_path, capsys):
    rc = main([str(sample_repo), "-o", str(tmp_path / "o.html"), "--max-bytes", "-5", "--no-open", "--no-progress"])
    assert rc == 2
    assert "Invalid size threshold" in capsys.readouterr().err


def test_opens_browser_unless_disabled(sample_repo, tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr("webbrowser.open", opened.append)
    out = tmp_path / "o.html"
    assert main([str(sample_repo), "-o", str(out), "--no-progress"]) == 0
    assert opened == [out.resolve().as_uri()]


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_default_output_named_after_current_directory(sample_repo, tmp_path, monkeypatch):
    outdir = tmp_path / "tmp"
    outdir.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(outdir))
    monkeypatch.chdir(sample_repo)
    assert main([".", "--no-open", "--no-progress"]) == 0
    assert (outdir / "sample.html").is_file()
    assert not (outdir / "..html").exists()
