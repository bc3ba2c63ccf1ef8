import os

import pytest

from cbzpack.errors import ArchiveIOError
from cbzpack.parsers.naming_rule import NamingRule
from cbzpack.parsers.page_collector import (
    MAX_PAGE_NUMBER,
    classify_candidates,
    list_candidate_files,
    parse_page_number,
)


def test_list_candidate_files_skips_directories(tmp_path, make_pages):
    make_pages(tmp_path, ["Comic-1.png", "Comic-2.png"])
    (tmp_path / "Comic-3.png").mkdir()

    names = [c.name for c in list_candidate_files(tmp_path)]

    assert names == ["Comic-1.png", "Comic-2.png"]


def test_list_candidate_files_is_not_recursive(tmp_path, make_pages):
    make_pages(tmp_path, ["Comic-1.png"])
    make_pages(tmp_path / "extras", ["Comic-2.png"])

    names = [c.name for c in list_candidate_files(tmp_path)]

    assert names == ["Comic-1.png"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_list_candidate_files_skips_symlinks(tmp_path, make_pages):
    make_pages(tmp_path, ["Comic-1.png"])
    try:
        (tmp_path / "Comic-2.png").symlink_to(tmp_path / "Comic-1.png")
    except OSError:
        pytest.skip("cannot create symlinks here")

    names = [c.name for c in list_candidate_files(tmp_path)]

    assert names == ["Comic-1.png"]


def test_list_candidate_files_reports_missing_folder(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(ArchiveIOError) as excinfo:
        list_candidate_files(missing)

    assert excinfo.value.path == missing
    assert excinfo.value.action == "list"


def test_parse_page_number_bounds():
    assert parse_page_number("0") == 0
    assert parse_page_number("0012") == 12
    assert parse_page_number(str(MAX_PAGE_NUMBER)) == MAX_PAGE_NUMBER
    assert parse_page_number(str(MAX_PAGE_NUMBER + 1)) is None


def test_classify_splits_pages_and_noise(tmp_path, make_pages):
    make_pages(tmp_path, ["Comic-1.png", "Comic-2.jpg", "cover.png", "notes.txt"])
    rule = NamingRule.from_title("Comic")

    result = classify_candidates(list_candidate_files(tmp_path), rule)

    assert sorted(p.number for p in result.pages) == [1, 2]
    assert result.noise == ["cover.png", "notes.txt"]
    assert result.has_noise


def test_classify_treats_overflowing_numbers_as_noise(tmp_path, make_pages):
    huge = "Comic-99999999999999999999.png"
    make_pages(tmp_path, ["Comic-1.png", huge])

    result = classify_candidates(list_candidate_files(tmp_path), NamingRule.from_title("Comic"))

    assert [p.number for p in result.pages] == [1]
    assert result.noise == [huge]


def test_classify_parses_case_insensitive_names(tmp_path, make_pages):
    make_pages(tmp_path, ["Comic-1.PNG", "comic-2.jpg", "COMIC-3.Jpeg"])

    result = classify_candidates(list_candidate_files(tmp_path), NamingRule.from_title("Comic"))

    assert {p.number for p in result.pages} == {1, 2, 3}
    assert result.noise == []


def test_classify_empty_listing():
    result = classify_candidates([], NamingRule.from_title("Comic"))

    assert result.pages == []
    assert not result.has_noise
