from pathlib import Path

import pytest

from pan_zoom import config


def _main_script(tmp_path: Path) -> Path:
    return tmp_path / "main.py"


def test_missing_file_gives_defaults(tmp_path):
    settings = config.load_settings(_main_script(tmp_path))

    assert settings == config.ZoomSettings()
    assert settings.speed_factor == config.ZOOM_SPEED_FACTOR
    assert not settings.verify_invariants


def test_config_path_is_next_to_main_script(tmp_path):
    assert config.config_path(_main_script(tmp_path)) == tmp_path.resolve() / "pan_zoom.ini"


def test_load_settings_reads_all_sections(tmp_path):
    (tmp_path / config.CONFIG_FILENAME).write_text(
        "[zoom]\nspeed_factor = 0.1\n"
        "[diagnostics]\nverify_invariants = yes\n"
        "[logging]\nlevel = debug\n",
        encoding="utf-8",
    )

    settings = config.load_settings(_main_script(tmp_path))

    assert settings == config.ZoomSettings(
        speed_factor=0.1, verify_invariants=True, log_level="DEBUG"
    )


def test_invalid_values_fall_back_with_warning(tmp_path, caplog):
    (tmp_path / config.CONFIG_FILENAME).write_text(
        "[zoom]\nspeed_factor = fast\n"
        "[diagnostics]\nverify_invariants = maybe\n"
        "[logging]\nlevel = chatty\n",
        encoding="utf-8",
    )

    with caplog.at_level("WARNING", logger="pan_zoom.config"):
        settings = config.load_settings(_main_script(tmp_path))

    assert settings == config.ZoomSettings()
    assert len(caplog.records) == 3


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "0", "-0.05"])
def test_unusable_speed_factor_falls_back_with_warning(tmp_path, caplog, raw):
    (tmp_path / config.CONFIG_FILENAME).write_text(
        f"[zoom]\nspeed_factor = {raw}\n", encoding="utf-8"
    )

    with caplog.at_level("WARNING", logger="pan_zoom.config"):
        settings = config.load_settings(_main_script(tmp_path))

    assert settings.speed_factor == config.ZOOM_SPEED_FACTOR
    assert "Ignoring invalid zoom speed factor" in caplog.text


def test_unreadable_file_gives_defaults(tmp_path):
    (tmp_path / config.CONFIG_FILENAME).write_text("speed_factor = 0.1\n", encoding="utf-8")

    assert config.load_settings(_main_script(tmp_path)) == config.ZoomSettings()


def test_save_then_load_keeps_unrelated_sections(tmp_path):
    ini_path = tmp_path / config.CONFIG_FILENAME
    ini_path.write_text("[window]\nwidth = 640\n", encoding="utf-8")
    settings = config.ZoomSettings(speed_factor=0.2, verify_invariants=True, log_level="WARNING")

    config.save_settings(settings, _main_script(tmp_path))

    assert config.load_settings(_main_script(tmp_path)) == settings
    assert "[window]" in ini_path.read_text(encoding="utf-8")


@pytest.mark.parametrize("raw, expected", [("1", True), ("Off", False), ("TRUE", True)])
def test_verify_invariants_accepts_common_booleans(tmp_path, raw, expected):
    (tmp_path / config.CONFIG_FILENAME).write_text(
        f"[diagnostics]\nverify_invariants = {raw}\n", encoding="utf-8"
    )

    assert config.load_settings(_main_script(tmp_path)).verify_invariants is expected
