"""
Tests for FileCollector.
"""
import pytest

from bucket_sync.exceptions import LocalSourceError
from bucket_sync.models.data_models import AccessLevel
from bucket_sync.services.file_collector import FileCollector


class TestFileCollector:
    """Test cases for FileCollector."""

    def test_collect_sorted_relative_paths(self, local_tree):
        """Test files are collected sorted with POSIX relative paths."""
        entries = FileCollector().collect(str(local_tree))

        assert [entry.relative_path for entry in entries] == ['index.html', 'static/logo.png', 'umi.js']
        assert entries[1].local_source_path == str(local_tree / 'static' / 'logo.png')
        assert all(entry.access_level == AccessLevel.PUBLIC_READ for entry in entries)

    def test_collect_with_exclude_and_access_level(self, local_tree):
        """Test exclude patterns and access level are applied."""
        collector = FileCollector(access_level=AccessLevel.PRIVATE, exclude=['static/*'])

        entries = collector.collect(str(local_tree))

        assert [entry.relative_path for entry in entries] == ['index.html', 'umi.js']
        assert entries[0].access_level == AccessLevel.PRIVATE

    def test_collect_empty_directory(self, tmp_path):
        """Test an empty directory yields no entries."""
        assert FileCollector().collect(str(tmp_path)) == []

    def test_collect_missing_directory(self, tmp_path):
        """Test a missing directory raises LocalSourceError."""
        with pytest.raises(LocalSourceError):
            FileCollector().collect(str(tmp_path / 'missing'))

    def test_collect_file_instead_of_directory(self, local_tree):
        """Test a file path raises LocalSourceError."""
        with pytest.raises(LocalSourceError):
            FileCollector().collect(str(local_tree / 'umi.js'))
