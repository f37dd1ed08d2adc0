"""Tests de las opciones de línea de comandos."""

from calculadora_teclado.main import build_parser, config_from_args


def test_defaults_match_config():
    config = config_from_args(build_parser().parse_args([]))
    assert config.voice_enabled is True
    assert config.window_width == 900
    assert config.window_height == 600
    assert config.show_key_guide is True


def test_options_override_config():
    args = build_parser().parse_args(
        ["--no-voice", "--width", "1200", "--height", "700", "--no-guide", "--rate", "180", "--volume", "3"]
    )
    config = config_from_args(args)
    assert config.voice_enabled is False
    assert config.window_width == 1200
    assert config.window_height == 700
    assert config.show_key_guide is False
    assert config.voice_rate == 180
    assert config.voice_volume == 1.0
    assert config.display_width() == 1200
