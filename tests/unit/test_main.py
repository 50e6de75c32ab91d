from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from pytest import CaptureFixture

from pattern_copy.config import CopyRequest
from pattern_copy.main import exit_code, run_copy, run_job, run_request
from pattern_copy.report import UserMessage


def _setup(tmp_path: Path, files: list[str]) -> tuple[Path, Path]:
    source = tmp_path / "source"
    dest = tmp_path / "dest"
    source.mkdir()
    dest.mkdir()
    for name in files:
        _ = (source / name).write_text(name)
    return source, dest


def test_run_copy_all_files(tmp_path: Path) -> None:
    source, dest = _setup(tmp_path, ["a.txt", "b.log"])
    (source / "sub").mkdir()

    message = run_copy(CopyRequest.create(source, dest, [""]))

    assert message == UserMessage(severity="success", title="2 files copied successfully")
    assert sorted(path.name for path in dest.iterdir()) == ["a.txt", "b.log"]


def test_run_copy_with_pattern(tmp_path: Path) -> None:
    source, dest = _setup(tmp_path, ["report.pdf", "report.txt", "notes.txt"])

    message = run_copy(CopyRequest.create(source, dest, [r"\.txt$"]))

    assert message.title == "2 files copied successfully"
    assert sorted(path.name for path in dest.iterdir()) == ["notes.txt", "report.txt"]


def test_run_copy_invalid_source(tmp_path: Path) -> None:
    _, dest = _setup(tmp_path, [])

    message = run_copy(CopyRequest.create(tmp_path / "missing", dest))

    assert message.severity == "failure"
    assert message.title == "Source directory doesn't exist or is invalid"


def test_run_copy_invalid_destination(tmp_path: Path) -> None:
    source, _ = _setup(tmp_path, ["a.txt"])
    not_a_dir = tmp_path / "file.txt"
    _ = not_a_dir.write_text("x")

    message = run_copy(CopyRequest.create(source, not_a_dir))

    assert message.severity == "failure"
    assert message.title == "Destination directory doesn't exist or is invalid"
    assert not_a_dir.read_text() == "x"


def test_run_copy_invalid_pattern_copies_nothing(tmp_path: Path) -> None:
    source, dest = _setup(tmp_path, ["a.txt", "b.txt"])

    with patch("pattern_copy.files.shutil.copyfile") as mock_copy:
        message = run_copy(CopyRequest.create(source, dest, [r"\.txt$", "["]))

    mock_copy.assert_not_called()
    assert message.severity == "failure"
    assert message.title == "Invalid regular expression: ["
    assert list(dest.iterdir()) == []


def test_run_copy_no_matches(tmp_path: Path) -> None:
    source, dest = _setup(tmp_path, ["a.txt"])

    message = run_copy(CopyRequest.create(source, dest, ["xyz123"]))

    assert message == UserMessage(severity="failure", title="No files match the patterns")


def test_run_copy_partial_failure(tmp_path: Path) -> None:
    names = [f"file{index}.txt" for index in range(5)]
    source, dest = _setup(tmp_path, names)
    for name in names[2:]:
        (dest / name).mkdir()

    message = run_copy(CopyRequest.create(source, dest))

    assert message.severity == "warning"
    assert message.title == "Copied 2 files, but 3 files failed"
    assert message.detail == "Failed files: file2.txt, file3.txt, file4.txt"


def test_exit_codes() -> None:
    assert exit_code(UserMessage(severity="success", title="ok")) == 0
    assert exit_code(UserMessage(severity="failure", title="no")) == 1
    assert exit_code(UserMessage(severity="warning", title="meh")) == 2


def test_run_request_verbose_output(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    source, dest = _setup(tmp_path, ["a.txt", "b.log"])
    _ = (dest / "a.txt").write_text("old")

    result = run_request(CopyRequest.create(source, dest, [r"\.txt$"]), verbose=True)

    out = capsys.readouterr().out
    assert result == 0
    assert "Selecting files:" in out
    assert "Patterns: \\.txt$" in out
    assert "Replacing existing files (1):" in out
    assert "Copied a.txt" in out
    assert out.rstrip().endswith("1 files copied successfully")


def test_run_request_quiet_failure(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    _, dest = _setup(tmp_path, [])

    result = run_request(CopyRequest.create(tmp_path / "missing", dest))

    out = capsys.readouterr().out
    assert result == 1
    assert out.startswith("Error: Source directory doesn't exist or is invalid")
    assert "Selecting files" not in out


def test_run_job(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    _ = _setup(tmp_path, ["a.txt", "b.log"])
    config_file = tmp_path / "copy.yml"
    _ = config_file.write_text("source: source\ndestination: dest\npatterns: log\n")

    result = run_job(config_file)

    assert result == 0
    assert (tmp_path / "dest" / "b.log").exists()
    assert not (tmp_path / "dest" / "a.txt").exists()
    assert "1 files copied successfully" in capsys.readouterr().out


def test_run_job_missing_config(tmp_path: Path) -> None:
    assert run_job(tmp_path / "missing.yml") == 1


def test_run_copy_unknown_user_home_source(tmp_path: Path) -> None:
    _, dest = _setup(tmp_path, [])

    message = run_copy(CopyRequest.create("~no_such_user_xyz/data", dest))

    assert message.severity == "failure"
    assert message.title == "Source directory doesn't exist or is invalid"
    assert message.detail == "~no_such_user_xyz/data"
