"""ABOUTME: Unit tests for Flask context processors
ABOUTME: Tests context processors that inject variables into template context"""

import hashlib
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from unittest.mock import patch

import pytest

from signupform.entrypoints.context_processors import (
    get_css_hash,
    get_signupform_version,
    static_versioning_context_processor,
)


class TestGetCssHash:
    """Test the get_css_hash function."""

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        # Clear cache to ensure clean state
        get_css_hash.cache_clear()
        yield
        get_css_hash.cache_clear()

    def test_get_css_hash_returns_short_hash(self, tmp_path: Path):
        """Test that get_css_hash returns a short hash of the file contents."""
        css_dir = tmp_path / "css"
        css_dir.mkdir()
        css_file = css_dir / "application.css"
        css_content = "body { color: red; }"
        css_file.write_text(css_content)

        expected_hash = hashlib.sha256(css_content.encode()).hexdigest()[:8]

        with patch("signupform.entrypoints.context_processors.config.get_static_path", return_value=tmp_path):
            result = get_css_hash()

        assert result == expected_hash
        assert len(result) == 8

    def test_get_css_hash_changes_when_content_changes(self, tmp_path: Path):
        """Test that the hash changes when file content changes."""
        css_dir = tmp_path / "css"
        css_dir.mkdir()
        css_file = css_dir / "application.css"

        css_file.write_text("body { color: red; }")
        with patch("signupform.entrypoints.context_processors.config.get_static_path", return_value=tmp_path):
            hash1 = get_css_hash()

        # Clear the cache to force recalculation
        get_css_hash.cache_clear()

        css_file.write_text("body { color: blue; }")
        with patch("signupform.entrypoints.context_processors.config.get_static_path", return_value=tmp_path):
            hash2 = get_css_hash()

        assert hash1 != hash2

    def test_get_css_hash_returns_empty_string_when_file_missing(self, tmp_path: Path):
        """Test that get_css_hash returns empty string when CSS file doesn't exist."""
        with patch("signupform.entrypoints.context_processors.config.get_static_path", return_value=tmp_path):
            result = get_css_hash()

        assert result == ""


class TestStaticVersioningContextProcessor:
    """Test the Flask context processor for static file versioning."""

    def test_context_processor_adds_css_hash(self):
        context = static_versioning_context_processor()

        assert isinstance(context, dict)
        assert "css_hash" in context
        assert isinstance(context["css_hash"], str)


class TestGetSignupformVersion:
    @pytest.fixture(autouse=True)
    def clear_cache(self):
        get_signupform_version.cache_clear()
        yield
        get_signupform_version.cache_clear()

    def test_version_from_installed_metadata(self):
        with patch("signupform.entrypoints.context_processors.version", return_value="1.2.3"):
            assert get_signupform_version() == "1.2.3"

    def test_version_unknown_when_not_installed(self):
        with patch(
            "signupform.entrypoints.context_processors.version",
            side_effect=PackageNotFoundError("signupform"),
        ):
            assert get_signupform_version() == "UNKNOWN"
