#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for directory enumeration and sample truncation.
"""

import pytest

from blurhash_tool.scanning.discovery import list_directory_entries


class TestListDirectoryEntries:

    def test_lists_every_entry(self, scenario_dir):
        (scenario_dir / "nested").mkdir()
        names = {p.name for p in list_directory_entries(scenario_dir)}
        assert names == {"a.png", "b.txt", "c.jpeg", "nested"}

    def test_paths_are_joined_onto_folder(self, scenario_dir):
        for path in list_directory_entries(scenario_dir):
            assert path.parent == scenario_dir

    def test_does_not_touch_files(self, scenario_dir):
        list_directory_entries(scenario_dir)
        assert (scenario_dir / "b.txt").exists()

    def test_sample_takes_leading_entries(self, scenario_dir):
        full = list_directory_entries(scenario_dir)
        assert list_directory_entries(scenario_dir, sample=2) == full[:2]

    @pytest.mark.parametrize("sample", [3, 4, 1000])
    def test_sample_at_or_above_total_is_a_noop(self, scenario_dir, sample):
        assert list_directory_entries(scenario_dir, sample=sample) == list_directory_entries(scenario_dir)

    def test_sample_zero(self, scenario_dir):
        assert list_directory_entries(scenario_dir, sample=0) == []

    def test_negative_sample_rejected(self, scenario_dir):
        with pytest.raises(ValueError):
            list_directory_entries(scenario_dir, sample=-1)

    def test_missing_folder(self, tmp_path):
        with pytest.raises(NotADirectoryError, match="is not a valid directory"):
            list_directory_entries(tmp_path / "nope")

    def test_file_instead_of_folder(self, tmp_path):
        f = tmp_path / "file.png"
        f.write_bytes(b"")
        with pytest.raises(NotADirectoryError):
            list_directory_entries(f)

    def test_empty_folder(self, tmp_path):
        assert list_directory_entries(tmp_path) == []
