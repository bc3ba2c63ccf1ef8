import zipfile

import pytest

import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CBZPACK_ARCHIVE_EXTENSION", raising=False)
    monkeypatch.setenv("CBZPACK_SHOW_PROGRESS", "false")


def test_success_prints_confirmation_on_stdout(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png", "Comic-2.png", "notes.txt"])

    assert main.main([str(folder)]) == main.EXIT_SUCCESS

    captured = capsys.readouterr()
    assert "Successfully created" in captured.out
    assert "Comic.cbz" in captured.out
    assert "notes.txt" in captured.err
    assert "notes.txt" not in captured.out
    assert (tmp_path / "Comic.cbz").exists()


def test_output_flag(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png"])
    target = tmp_path / "custom.cbz"

    assert main.main([str(folder), "-o", str(target)]) == main.EXIT_SUCCESS

    with zipfile.ZipFile(target) as archive:
        assert archive.namelist() == ["Comic-1.png"]


def test_missing_pages_use_distinct_exit_code(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png", "Comic-2.png", "Comic-4.png"])

    assert main.main([str(folder)]) == main.EXIT_MISSING_PAGES

    captured = capsys.readouterr()
    assert "Missing page numbers: [3]" in captured.err
    assert captured.out == ""
    assert not (tmp_path / "Comic.cbz").exists()


def test_no_matching_files_is_generic_failure(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["readme.txt"])

    assert main.main([str(folder)]) == main.EXIT_FAILURE

    captured = capsys.readouterr()
    assert "No valid image files found" in captured.err
    assert not (tmp_path / "Comic.cbz").exists()


def test_duplicate_pages_fail(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png", "Comic-01.jpg"])

    assert main.main([str(folder)]) == main.EXIT_FAILURE
    assert "Duplicate page numbers" in capsys.readouterr().err


def test_missing_folder_fails(tmp_path, capsys):
    assert main.main([str(tmp_path / "absent")]) == main.EXIT_FAILURE
    assert "does not exist" in capsys.readouterr().err


def test_file_instead_of_folder_fails(tmp_path, capsys):
    target = tmp_path / "Comic-1.png"
    target.write_bytes(b"x")

    assert main.main([str(target)]) == main.EXIT_FAILURE
    assert "not a directory" in capsys.readouterr().err


def test_invalid_configuration_fails(tmp_path, make_pages, monkeypatch, capsys):
    monkeypatch.setenv("CBZPACK_ARCHIVE_EXTENSION", "rar")
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png"])

    assert main.main([str(folder)]) == main.EXIT_FAILURE
    assert "CBZPACK_ARCHIVE_EXTENSION" in capsys.readouterr().err


def test_dry_run_writes_nothing(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png", "Comic-2.png"])

    assert main.main([str(folder), "--dry-run"]) == main.EXIT_SUCCESS

    assert "Comic-2.png" in capsys.readouterr().out
    assert not (tmp_path / "Comic.cbz").exists()


def test_missing_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main([])

    assert excinfo.value.code == 2


def test_sparse_high_page_number_reports_compact_range(tmp_path, make_pages, capsys):
    folder = tmp_path / "Comic"
    make_pages(folder, ["Comic-1.png", "Comic-2.png", "Comic-20240101.png"])

    assert main.main([str(folder)]) == main.EXIT_MISSING_PAGES

    err = capsys.readouterr().err
    assert "Missing page numbers: [3-20240100]" in err
    assert len(err) < 200
    assert not (tmp_path / "Comic.cbz").exists()
