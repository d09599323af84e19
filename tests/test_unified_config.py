"""Tests for unified configuration loading."""

from pathlib import Path

import pytest

from mpm import context
from mpm.exceptions import ConfigError
from mpm.scheduler import InconsistencyPolicy
from mpm.unified_config import ReportFormat, UnifiedConfig, discover_config, load_unified_config


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    config_path = _write(
        tmp_path / "mpm_config.yaml",
        """
engine:
  iteration_factor: 3
  on_inconsistent: raise
trace:
  include_initial_step: false
report:
  format: markdown
""",
    )

    config = load_unified_config(config_path)

    assert config.engine.iteration_factor == 3
    assert config.engine.on_inconsistent == InconsistencyPolicy.RAISE
    assert config.trace.include_initial_step is False
    assert config.report.format == ReportFormat.MARKDOWN


def test_partial_config_keeps_defaults(tmp_path: Path) -> None:
    config = load_unified_config(_write(tmp_path / "c.yaml", "report:\n  format: text\n"))

    assert config.engine.iteration_factor == 2
    assert config.engine.on_inconsistent == InconsistencyPolicy.FALLBACK
    assert config.trace.include_initial_step is True


def test_scheduling_view(tmp_path: Path) -> None:
    config = load_unified_config(
        _write(tmp_path / "c.yaml", "trace:\n  include_initial_step: false\n")
    )

    assert config.scheduling.trace.include_initial_step is False
    assert config.scheduling.engine == config.engine


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_unified_config(tmp_path / "missing.yaml")


def test_empty_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Empty"):
        load_unified_config(_write(tmp_path / "c.yaml", ""))


def test_unknown_section(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unknown config section"):
        load_unified_config(_write(tmp_path / "c.yaml", "resources: []\n"))


def test_invalid_value(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_unified_config(_write(tmp_path / "c.yaml", "engine:\n  iteration_factor: 0\n"))


def test_invalid_policy(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_unified_config(_write(tmp_path / "c.yaml", "engine:\n  on_inconsistent: ignore\n"))


class TestDiscoverConfig:
    def test_defaults_when_nothing_found(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        assert discover_config(tmp_path / "tasks.yaml") == UnifiedConfig()

    def test_next_to_task_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        _write(project_dir / "mpm_config.yaml", "report:\n  format: markdown\n")

        config = discover_config(project_dir / "tasks.yaml")

        assert config.report.format == ReportFormat.MARKDOWN

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        _write(tmp_path / "mpm_config.yaml", "engine:\n  iteration_factor: 5\n")

        assert discover_config().engine.iteration_factor == 5

    def test_context_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        _write(tmp_path / "mpm_config.yaml", "engine:\n  iteration_factor: 5\n")
        explicit = _write(tmp_path / "explicit.yaml", "engine:\n  iteration_factor: 7\n")
        context.set_config_path(explicit)

        assert discover_config(tmp_path / "tasks.yaml").engine.iteration_factor == 7
