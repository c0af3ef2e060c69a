import pytest

from easycopy.utils import bytes_human, derive_repo_name, derive_temp_output_path, slugify


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1023, "1023 B"),
        (1024, "1.0 KiB"),
        (1536, "1.5 KiB"),
        (1048576, "1.0 MiB"),
        (1024 ** 4, "1.0 TiB"),
        (1024 ** 5, "1024.0 TiB"),
    ],
)
def test_bytes_human(n, expected):
    assert bytes_human(n) == expected


def test_slugify():
    assert slugify("src/main.rs") == "src-main-rs"
    assert slugify("README.md") == "README-md"
    assert slugify("a_b-c/d e") == "a_b-c-d-e"


def test_slugify_collisions_are_not_disambiguated():
    assert slugify("a.b") == slugify("a/b") == "a-b"


def test_derive_repo_name():
    assert derive_repo_name("https://github.com/owner/repo") == "repo"
    assert derive_repo_name("https://github.com/owner/repo.git") == "repo"
    assert derive_repo_name("https://github.com/owner/repo/") == "repo"
    assert derive_repo_name("") == "repo"


def test_derive_temp_output_path():
    assert derive_temp_output_path("https://github.com/owner/proj.git").name == "proj.html"


def test_derive_repo_name_resolves_local_directory(tmp_path, monkeypatch):
    (tmp_path / "proj").mkdir()
    monkeypatch.chdir(tmp_path / "proj")
    assert derive_repo_name(".") == "proj"
    assert derive_repo_name("./") == "proj"
    assert derive_temp_output_path(".").name == "proj.html"


def test_derive_repo_name_local_path_with_trailing_slash(tmp_path):
    (tmp_path / "tool.git").mkdir()
    assert derive_repo_name(f"{tmp_path / 'tool.git'}/") == "tool"
