from configparser import ConfigParser

from trim_range.config import (
    CONFIG_FILENAME,
    RangeSeekBarConfig,
    config_path,
    load_config,
    save_config,
)


def _main_script(tmp_path):
    return tmp_path / "main.py"


def test_config_path_sits_next_to_main_script(tmp_path):
    assert config_path(_main_script(tmp_path)) == tmp_path.resolve() / CONFIG_FILENAME


def test_missing_file_returns_defaults(tmp_path):
    assert load_config(_main_script(tmp_path)) == RangeSeekBarConfig()


def test_save_then_load_round_trips(tmp_path):
    config = RangeSeekBarConfig(
        bounds_max=187_345.0,
        minimum_span=2_500.0,
        handle_width=16.0,
        padding_left=4.0,
        notify_while_dragging=True,
        touch_slop=12.0,
    )

    save_config(config, _main_script(tmp_path))

    assert load_config(_main_script(tmp_path)) == config


def test_save_preserves_unrelated_sections(tmp_path):
    ini_path = tmp_path / CONFIG_FILENAME
    ini_path.write_text("[window]\nwidth = 640\n", encoding="utf-8")

    save_config(RangeSeekBarConfig(), _main_script(tmp_path))

    parser = ConfigParser()
    parser.read(ini_path, encoding="utf-8")
    assert parser.get("window", "width") == "640"
    assert parser.getfloat("range", "minimum_span") == 5_000.0
    assert parser.getboolean("interaction", "notify_while_dragging") is False


def test_malformed_value_keeps_default(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(
        "[range]\nbounds_max = lots\nminimum_span = 2500\n"
        "[interaction]\nnotify_while_dragging = maybe\n",
        encoding="utf-8",
    )

    config = load_config(_main_script(tmp_path))

    assert config.bounds_max == 60_000.0
    assert config.minimum_span == 2_500.0
    assert config.notify_while_dragging is False


def test_unparseable_file_falls_back_to_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("bounds_max = 10\n", encoding="utf-8")

    assert load_config(_main_script(tmp_path)) == RangeSeekBarConfig()
