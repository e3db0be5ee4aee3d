"""
Tests for the path string helpers.
"""

import os

import pytest

from longpaths import paths
from longpaths.consts import WINDOWS


class TestLongPaths:

    def test_prefixes_drive_path(self):
        assert paths.to_long_path("C:\\a\\b.txt") == "\\\\?\\C:\\a\\b.txt"

    def test_normalizes_before_prefixing(self):
        assert paths.to_long_path("C:/a/../b/c.txt") == "\\\\?\\C:\\b\\c.txt"

    def test_unc_path(self):
        assert paths.to_long_path(
            "\\\\server\\share\\x") == "\\\\?\\UNC\\server\\share\\x"

    def test_relative_and_prefixed_unchanged(self):
        assert paths.to_long_path("a\\b") == "a\\b"
        assert paths.to_long_path("\\\\?\\C:\\a") == "\\\\?\\C:\\a"

    def test_device_path_unchanged(self):
        assert paths.to_long_path("\\\\.\\COM1") == "\\\\.\\COM1"
        assert paths.to_long_path(
            "\\\\.\\PhysicalDrive0") == "\\\\.\\PhysicalDrive0"

    def test_strip(self):
        assert paths.strip_long_path_prefix("\\\\?\\C:\\a") == "C:\\a"
        assert paths.strip_long_path_prefix(
            "\\\\?\\UNC\\server\\share\\x") == "\\\\server\\share\\x"
        assert paths.strip_long_path_prefix("C:\\a") == "C:\\a"

    def test_is_long_path(self):
        assert paths.is_long_path("\\\\?\\C:\\a")
        assert not paths.is_long_path("C:\\a")

    @pytest.mark.skipif(WINDOWS, reason="paths are only rewritten on Windows")
    def test_native_path_unchanged_elsewhere(self):
        assert paths.native_path("some/relative/path") == "some/relative/path"

    @pytest.mark.skipif(not WINDOWS, reason="Windows only")
    def test_native_path_on_windows(self):
        assert paths.native_path("C:\\a") == "\\\\?\\C:\\a"


class TestNames:

    def test_file_name_and_extension(self):
        p = os.path.join("dir", "sub", "file.tar.gz")
        assert paths.get_file_name_from_file_path(p) == "file.tar.gz"
        assert paths.get_extension(p) == ".gz"
        assert paths.get_extension(os.path.join("dir", "README")) == ""

    def test_directory_names(self):
        p = os.path.join("dir", "sub", "file.txt")
        assert paths.get_directory_path_name_from_file_path(
            p) == os.path.join("dir", "sub")
        assert paths.get_directory_name_only_from_file_path(
            os.path.join("dir", "sub") + os.sep) == "sub"

    def test_change_extension(self):
        assert paths.change_extension("a/b.txt", ".md") == "a/b.md"
        assert paths.change_extension("a/b.txt", "md") == "a/b.md"
        assert paths.change_extension("a/b.txt", None) == "a/b"
        assert paths.change_extension("a/b", ".txt") == "a/b.txt"

    def test_combine(self):
        assert paths.combine("a", "b") == os.path.join("a", "b")
        absolute = os.path.abspath("x")
        assert paths.combine("a", absolute) == absolute

    def test_optional_fspath(self):
        assert paths.optional_fspath(None) is None
        assert paths.optional_fspath("a") == "a"
