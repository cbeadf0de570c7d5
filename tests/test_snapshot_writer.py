"""Tests for snapshot writing and discovery."""

import json

import pytest

from pallet_seo.snapshot.writer import (
    find_latest_snapshot,
    load_snapshot,
    snapshot_filename,
    write_snapshot,
)
from tests.conftest import make_page


def test_snapshot_filename():
    assert snapshot_filename(1712345678901) == "generated-1712345678901.json"
    assert snapshot_filename().startswith("generated-")


def test_write_and_load(tmp_path):
    pages = [make_page("amazon-liquidation", "amazon")]
    path = write_snapshot(pages, output_dir=tmp_path / "out")

    assert path.parent == tmp_path / "out"
    assert path.name.startswith("generated-")
    assert load_snapshot(path) == pages


def test_explicit_output_path(tmp_path):
    target = tmp_path / "nested" / "amazon.json"
    path = write_snapshot([], output_path=target)
    assert path == target
    assert json.loads(target.read_text(encoding="utf-8")) == []


def test_existing_file_not_overwritten(tmp_path):
    target = tmp_path / "generated-1.json"
    target.write_text("[\"original\"]", encoding="utf-8")
    with pytest.raises(FileExistsError):
        write_snapshot([], output_path=target)
    assert load_snapshot(target) == ["original"]


def test_default_output_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SEO_OUTPUT_DIR", str(tmp_path / "env-out"))
    path = write_snapshot([])
    assert path.parent == tmp_path / "env-out"


class TestFindLatest:
    def test_picks_highest_timestamp(self, tmp_path):
        for stamp in (1000, 3000, 20000):
            (tmp_path / f"generated-{stamp}.json").write_text("[]", encoding="utf-8")
        assert find_latest_snapshot(tmp_path).name == "generated-20000.json"

    def test_ignores_results_files(self, tmp_path):
        (tmp_path / "generated-1000.json").write_text("[]", encoding="utf-8")
        (tmp_path / "generated-1000.results.json").write_text("{}", encoding="utf-8")
        assert find_latest_snapshot(tmp_path).name == "generated-1000.json"

    def test_empty_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="No generated files"):
            find_latest_snapshot(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_latest_snapshot(tmp_path / "missing")


class TestLoad:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_snapshot(tmp_path / "nope.json")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "generated-1.json"
        path.write_text("{\"slug\": \"x\"}", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON array"):
            load_snapshot(path)
