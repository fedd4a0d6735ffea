import pytest

from car_simulator_gui.config import (
    DEFAULT_PALETTE,
    CanvasConfig,
    GuiConfig,
    SymbolsConfig,
    load_gui_config,
)


class TestCanvasConfig:
    def test_cell_geometry(self):
        canvas = CanvasConfig(cell_size=64, margin=8)

        assert canvas.cell_origin(0, 0) == (8.0, 8.0)
        assert canvas.cell_origin(2, 1) == (136.0, 72.0)
        assert canvas.cell_center(0, 0) == (40.0, 40.0)


class TestSymbolsConfig:
    def test_food_symbols_cycle(self):
        symbols = SymbolsConfig(food=("a", "b"))

        assert symbols.food_symbol(0) == "a"
        assert symbols.food_symbol(1) == "b"
        assert symbols.food_symbol(2) == "a"


class TestGuiConfig:
    def test_color_falls_back_to_default(self):
        cfg = GuiConfig(palette={"cell": "#123456"})

        assert cfg.color("cell") == "#123456"
        assert cfg.color("car_failed") == DEFAULT_PALETTE["car_failed"]
        assert cfg.color("unknown") == "#000000"


class TestLoadGuiConfig:
    def test_bundled_config(self):
        cfg = load_gui_config()

        assert cfg.canvas.cell_size == 64
        assert cfg.settle_ms == 500
        assert len(cfg.symbols.food) == 2
        assert cfg.color("car_succeeded") == "#22c55e"

    def test_partial_config(self, temp_yaml_file):
        temp_yaml_file.write_text(
            "window_title: Demo\ntiming:\n  settle_ms: 0\nsymbols:\n  food: X\n",
            encoding="utf-8",
        )

        cfg = load_gui_config(temp_yaml_file)

        assert cfg.window_title == "Demo"
        assert cfg.settle_ms == 0
        assert cfg.symbols.food == ("X",)
        assert cfg.canvas == CanvasConfig()
        assert cfg.palette == DEFAULT_PALETTE

    def test_empty_file(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")

        assert load_gui_config(str(temp_yaml_file)) == GuiConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "canvas:\n  cell_size: 0\n",
            "canvas:\n  margin: -1\n",
            "timing:\n  settle_ms: -5\n",
            "symbols:\n  food: []\n",
        ],
    )
    def test_invalid_values(self, temp_yaml_file, content):
        temp_yaml_file.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError):
            load_gui_config(temp_yaml_file)
