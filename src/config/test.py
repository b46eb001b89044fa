"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_output_dir,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("CODEGEN_LOG_LEVEL", raising=False)
        result = get_environment(EnvVar.CODEGEN_LOG_LEVEL)
        assert result == "INFO"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("CODEGEN_LIBRARY_NAME", "FromEnv")
        result = get_environment(EnvVar.CODEGEN_LIBRARY_NAME, override="Explicit")
        assert result == "Explicit"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("CODEGEN_LIBRARY_NAME", "MyLibrary")
        result = get_environment(EnvVar.CODEGEN_LIBRARY_NAME)
        assert result == "MyLibrary"

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("CODEGEN_STRICT_NAMES", value)
            result = get_environment(EnvVar.CODEGEN_STRICT_NAMES)
            assert result is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("CODEGEN_ASSUME_NONNULL", value)
            result = get_environment(EnvVar.CODEGEN_ASSUME_NONNULL)
            assert result is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("CODEGEN_STRICT_NAMES", "maybe")
        assert get_environment(EnvVar.CODEGEN_STRICT_NAMES) is False

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("CODEGEN_OUTPUT_DIR", str(tmp_path))
        result = get_environment(EnvVar.CODEGEN_OUTPUT_DIR)
        assert result == tmp_path
        assert isinstance(result, Path)

    @pytest.mark.unit
    def test_none_default_for_package_name(self, monkeypatch):
        """Package name defaults to None when not set."""
        monkeypatch.delenv("CODEGEN_PACKAGE_NAME", raising=False)
        assert get_environment(EnvVar.CODEGEN_PACKAGE_NAME) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.CODEGEN_STRICT_NAMES)
        assert isinstance(info, EnvConfig)
        assert info.name == "CODEGEN_STRICT_NAMES"
        assert info.default is False
        assert info.var_type is bool
        assert info.category == "generation"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.CODEGEN_OUTPUT_DIR)
        assert "generated" in info.description

    @pytest.mark.unit
    def test_every_type_is_convertible(self):
        """Declared types are the ones the converter handles."""
        assert {var.value.var_type for var in EnvVar} <= {str, bool, Path}


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        generation_vars = list_environment_variables("generation")
        assert EnvVar.CODEGEN_LIBRARY_NAME in generation_vars
        assert EnvVar.CODEGEN_STRICT_NAMES in generation_vars
        assert EnvVar.CODEGEN_OUTPUT_DIR not in generation_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown categories yield no variables."""
        assert list_environment_variables("nope") == []


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetOutputDir:
    """Tests for output directory resolution."""

    @pytest.mark.unit
    def test_override_takes_priority(self, tmp_path, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("CODEGEN_OUTPUT_DIR", str(tmp_path / "from_env"))
        result = get_output_dir(tmp_path / "override")
        assert result == tmp_path / "override"

    @pytest.mark.unit
    def test_string_override(self, tmp_path):
        """Override parameter accepts string paths."""
        result = get_output_dir(str(tmp_path / "custom"))
        assert result == tmp_path / "custom"

    @pytest.mark.unit
    def test_env_var_used(self, tmp_path, monkeypatch):
        """CODEGEN_OUTPUT_DIR env var used when no override."""
        monkeypatch.setenv("CODEGEN_OUTPUT_DIR", str(tmp_path / "from_env"))
        assert get_output_dir() == tmp_path / "from_env"

    @pytest.mark.unit
    def test_default_under_cwd(self, tmp_path, monkeypatch):
        """Defaults to ./generated under the working directory."""
        monkeypatch.delenv("CODEGEN_OUTPUT_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert get_output_dir() == tmp_path / "generated"


class TestGetLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.unit
    def test_default_level(self, monkeypatch):
        """Defaults to INFO."""
        monkeypatch.delenv("CODEGEN_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.unit
    def test_env_level_is_upper_cased(self, monkeypatch):
        """Level names from the environment are normalized."""
        monkeypatch.setenv("CODEGEN_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_override(self, monkeypatch):
        """Override beats the environment."""
        monkeypatch.setenv("CODEGEN_LOG_LEVEL", "debug")
        assert get_log_level("warning") == "WARNING"
