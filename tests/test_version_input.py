"""Tests for version input resolution."""

import pytest

from versioning.inputs import VersionFileNotFoundError, resolve_version_input


class TestResolveVersionInput:
    """Test precedence between explicit versions and version files."""

    def test_explicit_versions(self, tmp_path):
        """Explicit versions are returned, blanks dropped."""
        assert resolve_version_input(["3.12", " ", "3.11 "], cwd=str(tmp_path)) == ["3.12", "3.11"]

    def test_explicit_versions_win_over_file(self, tmp_path, caplog):
        """Both inputs given: the file is ignored with a warning."""
        version_file = tmp_path / ".python-version"
        version_file.write_text("3.9\n", encoding="utf-8")
        assert resolve_version_input(["3.12"], str(version_file)) == ["3.12"]
        assert "only python-version will be used" in caplog.text

    def test_version_file(self, tmp_path):
        """A given version file is parsed by format."""
        version_file = tmp_path / "pyproject.toml"
        version_file.write_text('[project]\nrequires-python = ">=3.10"\n', encoding="utf-8")
        assert resolve_version_input([], str(version_file)) == [">=3.10"]

    def test_missing_version_file(self, tmp_path):
        """A missing explicit file raises with its path in the message."""
        missing = str(tmp_path / "nope")
        with pytest.raises(VersionFileNotFoundError) as exc:
            resolve_version_input(None, missing)
        assert missing in str(exc.value)
        assert isinstance(exc.value, FileNotFoundError)

    def test_default_python_version_file(self, tmp_path):
        """.python-version in the working directory is the fallback."""
        (tmp_path / ".python-version").write_text("3.11\n", encoding="utf-8")
        assert resolve_version_input(cwd=str(tmp_path)) == ["3.11"]

    def test_nothing_specified(self, tmp_path, caplog):
        """No inputs and no default file yields an empty list."""
        assert resolve_version_input(cwd=str(tmp_path)) == []
        assert "Neither python-version nor python-version-file" in caplog.text
