from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import yaml

from car_simulator.core.enums import Mode
from car_simulator.core.exceptions import ConfigurationError
from car_simulator.utils.config_loader import (
    BoardConfig,
    GameConfig,
    ObstaclesConfig,
    PickFoodConfig,
    _get_config_path,
    _load_yaml_file,
    _parse_game_cfg_from_dict,
    check_placement_fits,
    clear_config_cache,
    get_config,
    load_config,
    validate_game_config,
)


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.board.size == 5
        assert cfg.pick_food.food_count == 2
        assert cfg.obstacles.min_obstacles == 2
        assert cfg.obstacles.max_obstacles == 4

    def test_immutable(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.board = BoardConfig(size=7)

    def test_with_board_size(self):
        cfg = GameConfig().with_board_size(8)
        assert cfg.board.size == 8
        assert cfg.pick_food == PickFoodConfig()

    def test_with_board_size_validates(self):
        with pytest.raises(ConfigurationError):
            GameConfig().with_board_size(1)


class TestValidateGameConfig:
    def test_default_is_valid(self):
        validate_game_config(GameConfig())

    def test_board_too_small(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_game_config(GameConfig(board=BoardConfig(size=1)))
        assert exc_info.value.config_key == "board.size"

    def test_no_food(self):
        with pytest.raises(ConfigurationError):
            validate_game_config(GameConfig(pick_food=PickFoodConfig(food_count=0)))

    def test_negative_obstacles(self):
        cfg = GameConfig(obstacles=ObstaclesConfig(min_obstacles=-1, max_obstacles=2))
        with pytest.raises(ConfigurationError):
            validate_game_config(cfg)

    def test_min_exceeds_max(self):
        cfg = GameConfig(obstacles=ObstaclesConfig(min_obstacles=5, max_obstacles=3))
        with pytest.raises(ConfigurationError) as exc_info:
            validate_game_config(cfg)
        assert exc_info.value.config_key == "modes.obstacles"


    def test_placement_counts_are_not_checked(self):
        validate_game_config(GameConfig(board=BoardConfig(size=2)))


class TestCheckPlacementFits:
    @pytest.mark.parametrize("mode", list(Mode))
    def test_default_config_fits(self, mode):
        check_placement_fits(GameConfig(), mode)

    def test_basic_fits_small_board(self):
        check_placement_fits(GameConfig(board=BoardConfig(size=2)), Mode.BASIC)

    def test_food_does_not_fit(self):
        cfg = GameConfig(board=BoardConfig(size=2), pick_food=PickFoodConfig(food_count=4))
        with pytest.raises(ConfigurationError, match="do not fit") as exc_info:
            check_placement_fits(cfg, Mode.PICK_FOOD)
        assert exc_info.value.config_key == "modes.pick_food.food_count"

    def test_food_fills_board(self):
        cfg = GameConfig(board=BoardConfig(size=2), pick_food=PickFoodConfig(food_count=3))
        check_placement_fits(cfg, Mode.PICK_FOOD)

    def test_obstacles_do_not_fit(self):
        cfg = GameConfig(
            board=BoardConfig(size=2),
            obstacles=ObstaclesConfig(min_obstacles=1, max_obstacles=3),
        )
        with pytest.raises(ConfigurationError, match="do not fit") as exc_info:
            check_placement_fits(cfg, Mode.OBSTACLES)
        assert exc_info.value.config_key == "modes.obstacles.max_obstacles"

    def test_obstacles_fill_board(self):
        cfg = GameConfig(
            board=BoardConfig(size=2),
            obstacles=ObstaclesConfig(min_obstacles=0, max_obstacles=2),
        )
        check_placement_fits(cfg, Mode.OBSTACLES)

    def test_other_modes_ignore_obstacle_range(self):
        cfg = GameConfig(board=BoardConfig(size=2), pick_food=PickFoodConfig(food_count=1))
        check_placement_fits(cfg, Mode.BASIC)
        check_placement_fits(cfg, Mode.PICK_FOOD)


class TestGetConfigPath:
    def test_get_config_path_default(self):
        path = _get_config_path()
        assert path.endswith("config.yaml")
        assert Path(path).parent.name == "car_simulator"

    def test_get_config_path_custom(self):
        custom_path = "/path/to/custom/config.yaml"
        assert _get_config_path(custom_path) == custom_path


class TestLoadYamlFile:
    def test_load_valid_yaml(self, temp_yaml_file):
        yaml_content = {"board": {"size": 6}}
        with temp_yaml_file.open("w", encoding="utf-8") as fh:
            yaml.dump(yaml_content, fh)

        assert _load_yaml_file(temp_yaml_file) == yaml_content

    def test_load_invalid_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_load_empty_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")

        assert _load_yaml_file(temp_yaml_file) == {}

    def test_load_non_mapping(self, temp_yaml_file):
        temp_yaml_file.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            _load_yaml_file(temp_yaml_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            _load_yaml_file(tmp_path / "missing.yaml")


class TestParseGameCfgFromDict:
    def test_parse_valid_config(self, valid_game_config_dict):
        cfg = _parse_game_cfg_from_dict(valid_game_config_dict)
        assert isinstance(cfg, GameConfig)
        assert cfg.board.size == 5
        assert cfg.obstacles.max_obstacles == 4

    def test_modes_section_optional(self):
        cfg = _parse_game_cfg_from_dict({"board": {"size": 7}})
        assert cfg.board.size == 7
        assert cfg.pick_food.food_count == 2

    def test_missing_board(self):
        with pytest.raises(ConfigurationError, match="Missing required config key"):
            _parse_game_cfg_from_dict({"modes": {}})

    def test_invalid_type(self, valid_game_config_dict):
        valid_game_config_dict["board"]["size"] = "large"
        with pytest.raises(ConfigurationError, match="Invalid config schema"):
            _parse_game_cfg_from_dict(valid_game_config_dict)

    def test_validation_applies(self, valid_game_config_dict):
        valid_game_config_dict["modes"]["obstacles"]["min_obstacles"] = 9
        with pytest.raises(ConfigurationError):
            _parse_game_cfg_from_dict(valid_game_config_dict)


class TestLoadConfig:
    def test_load_config_success(self, temp_config_yaml_file):
        cfg = load_config(path=str(temp_config_yaml_file))
        assert isinstance(cfg, GameConfig)
        assert cfg.pick_food.food_count == 2

    def test_load_bundled_config(self):
        cfg = load_config()
        assert cfg == GameConfig()


class TestGetConfig:
    def test_get_config_loads_default_when_none(self):
        with patch("car_simulator.utils.config_loader._LOADER_CACHE", {}):
            with patch("car_simulator.utils.config_loader.load_config") as mock_load:
                mock_config = Mock(spec=GameConfig)
                mock_load.return_value = mock_config
                result = get_config()
                mock_load.assert_called_once_with()
                assert result == mock_config

    def test_get_config_is_cached(self):
        clear_config_cache()
        first = get_config()
        assert get_config() is first

        clear_config_cache()
        assert get_config() is not first
