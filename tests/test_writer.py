from pathlib import Path

from til_creator.writer import FileWriter


def test_writer_creates_missing_parents(tmp_path: Path):
    target = tmp_path / "2024" / "03" / "0307.md"

    result = FileWriter().write(target, "hello\n")

    assert result == target
    assert (tmp_path / "2024").is_dir()
    assert (tmp_path / "2024" / "03").is_dir()
    assert target.read_text(encoding="utf-8") == "hello\n"


def test_writer_overwrites_existing_file(tmp_path: Path):
    target = tmp_path / "2024" / "03" / "0307.md"
    target.parent.mkdir(parents=True)
    target.write_text("old notes that are much longer than the new content\n", encoding="utf-8")

    FileWriter().write(target, "new\n")

    assert target.read_text(encoding="utf-8") == "new\n"
    assert list(target.parent.iterdir()) == [target]


def test_writer_writes_utf8(tmp_path: Path):
    target = tmp_path / "entry.md"
    FileWriter().write(target, "## 📅 오늘\n")
    assert target.read_bytes() == "## 📅 오늘\n".encode("utf-8")
