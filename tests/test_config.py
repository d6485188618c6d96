"""Configuration loading tests"""

import pytest
import yaml
from pydantic import ValidationError

from undercover.config import ConfigError, GameSettings, load_settings
from undercover.engine.words import WORD_PAIRS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("UNDERCOVER_CONFIG", raising=False)
    monkeypatch.delenv("UNDERCOVER_LOG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


def _write_config(path, data: dict) -> str:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestGameSettings:

    def test_defaults(self):
        settings = GameSettings()
        assert settings.player_count == 5
        assert settings.num_undercover == 1
        assert settings.num_mr_white == 1
        assert settings.log_dir == "games"
        assert settings.word_pairs() == WORD_PAIRS

    def test_from_yaml_sections(self):
        settings = GameSettings.from_yaml_dict({
            "game": {"player_count": 8},
            "roles": {"undercover": 2, "mrwhite": 1},
            "players": ["Ann", "Ben"],
            "logging": {"dir": None},
            "word_pairs": [["Sushi", "Sashimi"]],
        })
        assert settings.player_count == 8
        assert settings.num_undercover == 2
        assert settings.num_mr_white == 1
        assert settings.log_dir is None
        assert settings.word_pairs()[-1] == ("Sushi", "Sashimi")
        assert settings.seat_names() == ["Ann", "Ben", "", "", "", "", "", ""]

    def test_empty_yaml(self):
        assert GameSettings.from_yaml_dict(None) == GameSettings()

    @pytest.mark.parametrize("values", [
        {"player_count": 2},
        {"player_count": 13},
        {"player_count": 5, "num_undercover": 2, "num_mr_white": 1},
        {"num_undercover": 0, "num_mr_white": 0},
        {"num_undercover": -1},
        {"player_count": 3, "num_mr_white": 0, "player_names": ["A", "B", "C", "D"]},
    ])
    def test_invalid_settings(self, values):
        with pytest.raises(ValidationError):
            GameSettings(**values)

    @pytest.mark.parametrize("pair", [["Tea"], ["Tea", "tea"], ["Tea", " "]])
    def test_invalid_word_pairs(self, pair):
        with pytest.raises(ValidationError):
            GameSettings(extra_word_pairs=[pair])


class TestLoadSettings:

    def test_missing_file_gives_defaults(self):
        assert load_settings("does/not/exist.yaml") == GameSettings()

    def test_reads_file(self, tmp_path):
        path = _write_config(tmp_path / "table.yaml", {"game": {"player_count": 7}})
        assert load_settings(path).player_count == 7

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = _write_config(tmp_path / "env.yaml", {"roles": {"undercover": 2, "mrwhite": 0}})
        monkeypatch.setenv("UNDERCOVER_CONFIG", path)
        settings = load_settings()
        assert settings.num_undercover == 2
        assert settings.num_mr_white == 0

    def test_default_location(self, tmp_path):
        (tmp_path / "config").mkdir()
        _write_config(tmp_path / "config" / "game.yaml", {"game": {"player_count": 9}})
        assert load_settings().player_count == 9

    def test_log_dir_override(self, monkeypatch):
        monkeypatch.setenv("UNDERCOVER_LOG_DIR", "elsewhere")
        assert load_settings().log_dir == "elsewhere"
        monkeypatch.setenv("UNDERCOVER_LOG_DIR", "none")
        assert load_settings().log_dir is None

    def test_invalid_file(self, tmp_path):
        path = _write_config(tmp_path / "bad.yaml", {"game": {"player_count": 4}, "roles": {"undercover": 2}})
        with pytest.raises(ValidationError):
            load_settings(path)

    def test_top_level_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_settings(str(path))

    @pytest.mark.parametrize("text", ["game: 7\n", "roles: [1, 2]\n", "logging: games\n"])
    def test_sections_must_be_mappings(self, tmp_path, text):
        path = tmp_path / "section.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError, match="section"):
            load_settings(str(path))

    def test_unparsable_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("game: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_settings(str(path))

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            GameSettings.from_yaml_dict(["not", "a", "mapping"])
