"""Tests for YardConfig and the TOML loader."""
from __future__ import annotations

import pytest
from depot_yard import ConfigError, YardConfig, load_config, parse_config


class TestYardConfig:
    def test_defaults(self) -> None:
        cfg = YardConfig()
        assert cfg.tps == 60
        assert (cfg.field_width, cfg.field_height) == (800.0, 600.0)
        assert cfg.half_size == 15.0
        assert cfg.start == (400.0, 260.0)
        assert cfg.roles == {"storage": "1", "production": "2", "player": "player"}
        assert cfg.keep_drops_when_full is False
        assert cfg.strict_output_capacity is True

    def test_roles_not_shared_between_instances(self) -> None:
        a, b = YardConfig(), YardConfig()
        assert a.roles is not b.roles

    @pytest.mark.parametrize("changes", [
        {"tps": 0},
        {"field_width": 0},
        {"player_size": 0},
        {"player_size": 700},
        {"player_speed": -1},
        {"experience_per_level": 0},
        {"inventory_slots": -1},
        {"roles": {"storage": 1}},
    ])
    def test_invalid_values_raise(self, changes) -> None:
        with pytest.raises(ConfigError):
            YardConfig(**changes)

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


class TestParseConfig:
    def test_empty_table_gives_defaults(self) -> None:
        assert parse_config({}) == YardConfig()

    def test_overrides(self) -> None:
        cfg = parse_config({"tps": 30, "player_speed": 3, "keep_drops_when_full": True})
        assert cfg.tps == 30
        assert cfg.player_speed == 3.0
        assert isinstance(cfg.player_speed, float)
        assert cfg.keep_drops_when_full is True

    def test_roles_merge_over_base(self) -> None:
        cfg = parse_config({"roles": {"production": "3"}})
        assert cfg.roles == {"storage": "1", "production": "3", "player": "player"}

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="unknown yard settings: colour"):
            parse_config({"colour": "red"})

    @pytest.mark.parametrize("table", [
        {"tps": "fast"},
        {"tps": 60.5},
        {"tps": True},
        {"player_speed": "5"},
        {"strict_output_capacity": 1},
        {"roles": "storage"},
    ])
    def test_wrong_types(self, table) -> None:
        with pytest.raises(ConfigError):
            parse_config(table)

    def test_out_of_range_value(self) -> None:
        with pytest.raises(ConfigError, match="tps must be positive"):
            parse_config({"tps": -5})


class TestLoadConfig:
    def test_reads_yard_table(self, tmp_path) -> None:
        path = tmp_path / "yard.toml"
        path.write_text(
            "[yard]\n"
            "tps = 20\n"
            "inventory_slots = 4\n"
            "\n"
            "[yard.roles]\n"
            "storage = \"3\"\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.tps == 20
        assert cfg.inventory_slots == 4
        assert cfg.roles["storage"] == "3"
        assert cfg.roles["production"] == "2"

    def test_file_without_yard_table(self, tmp_path) -> None:
        path = tmp_path / "other.toml"
        path.write_text("[something]\nvalue = 1\n", encoding="utf-8")
        assert load_config(path) == YardConfig()

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[yard\ntps = ", encoding="utf-8")
        with pytest.raises(ConfigError, match="broken.toml"):
            load_config(path)

    def test_yard_not_a_table(self, tmp_path) -> None:
        path = tmp_path / "flat.toml"
        path.write_text("yard = 3\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a table"):
            load_config(str(path))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")
