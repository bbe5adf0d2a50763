"""Unit tests for configuration models and loading."""

import pytest

from speechcards.config.loader import load_config
from speechcards.models.config import CardsConfig, Config, EditorConfig, OutlineConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no SPEECHCARDS_* overrides leak in from the environment."""
    for name in ("SPEECHCARDS_NEW_ITEM_TITLE", "SPEECHCARDS_INDENT_WIDTH", "SPEECHCARDS_MAX_STRUCTURAL_DEPTH"):
        monkeypatch.delenv(name, raising=False)


class TestConfigModels:
    """Test configuration models."""

    def test_defaults(self):
        config = Config()

        assert config.editor.new_item_title == "New item"
        assert config.outline.indent_width == 3
        assert config.cards.max_structural_depth == 3

    def test_blank_new_item_title_rejected(self):
        with pytest.raises(ValueError, match="must not be blank"):
            EditorConfig(new_item_title="   ")

    def test_indent_width_bounds(self):
        with pytest.raises(ValueError):
            OutlineConfig(indent_width=0)

    def test_structural_depth_bounds(self):
        with pytest.raises(ValueError):
            CardsConfig(max_structural_depth=0)

    def test_config_immutable(self):
        config = Config()

        with pytest.raises(Exception):  # Pydantic ValidationError
            config.cards = CardsConfig(max_structural_depth=4)


class TestLoadConfig:
    """Test the loader with environment overrides."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")

        assert config == Config()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == Config()

    def test_file_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("editor:\n  new_item_title: Point\n")

        assert load_config(path).editor.new_item_title == "Point"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("outline:\n  indent_width: 2\n")
        monkeypatch.setenv("SPEECHCARDS_INDENT_WIDTH", "4")
        monkeypatch.setenv("SPEECHCARDS_MAX_STRUCTURAL_DEPTH", "2")
        monkeypatch.setenv("SPEECHCARDS_NEW_ITEM_TITLE", "Idea")

        config = load_config(path)

        assert config.outline.indent_width == 4
        assert config.cards.max_structural_depth == 2
        assert config.editor.new_item_title == "Idea"

    def test_invalid_env_int_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SPEECHCARDS_INDENT_WIDTH", "wide")

        assert load_config(tmp_path / "missing.yaml").outline.indent_width == 3

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("cards:\n  max_structural_depth: 0\n")

        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("outline: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_section_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("outline: 3\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)
