import pytest

from pngtools.findpng import find_pngs, main
from pngtools.png import PNG_SIGNATURE


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.png").write_bytes(PNG_SIGNATURE + b"rest")
    (tmp_path / "notes.txt").write_bytes(b"plain text here")
    (tmp_path / "short").write_bytes(PNG_SIGNATURE[:4])
    nested = tmp_path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (nested / "b.bin").write_bytes(PNG_SIGNATURE)
    (tmp_path / "sub" / "fake.png").write_bytes(b"\x00" * 16)
    return tmp_path


def test_find_pngs_recurses_and_checks_signature(tree):
    base = str(tree)
    found = set(find_pngs(base))
    assert found == {f"{base}/a.png", f"{base}/sub/deeper/b.bin"}


def test_find_pngs_empty_directory(tmp_path):
    assert list(find_pngs(tmp_path)) == []


def test_find_pngs_missing_directory(tmp_path):
    with pytest.raises(OSError):
        list(find_pngs(tmp_path / "missing"))


def test_main_prints_found_paths(tree, capsys):
    base = str(tree)
    assert main([base]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == sorted([f"{base}/a.png", f"{base}/sub/deeper/b.bin"])


def test_main_reports_nothing_found(tmp_path, capsys):
    (tmp_path / "x.txt").write_bytes(b"hello world!")
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out == "findpng: No PNG file found \n"


def test_main_usage_errors(capsys):
    assert main([]) == 1
    assert main(["a", "b"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_directory(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert main([missing]) == 2
    assert capsys.readouterr().err.startswith(f"opendir({missing})")