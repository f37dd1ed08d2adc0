"""Tests de KeyboardCalculatorApp sin abrir ventana ni motor de voz."""

import pytest

pytest.importorskip("cv2")

from calculadora_teclado.app import KeyboardCalculatorApp
from calculadora_teclado.config import CalculatorConfig


class StubVoice:
    def __init__(self):
        self.messages = []

    def speak(self, text):
        self.messages.append(text)

    def speak_digit(self, digit):
        self.messages.append(f"digit:{digit}")

    def speak_operation(self, op):
        self.messages.append(f"op:{op}")

    def speak_result(self, result):
        self.messages.append(f"result:{result}")


@pytest.fixture
def app():
    config = CalculatorConfig()
    config.voice_enabled = False
    return KeyboardCalculatorApp(config, voice=StubVoice())


def type_keys(app, *keys):
    with app.keys.subscribe(app.process):
        for key in keys:
            app.keys.feed_key(key)


def test_keyboard_sequence_computes(app):
    type_keys(app, "3", "+", "4", "Enter")
    assert app.calc.display == "7"
    assert app.calc.history_text == ""
    assert app.voice.messages[-1] == "result:7"


def test_chained_operators_through_keyboard(app):
    type_keys(app, "3", "+", "4", "+")
    assert app.calc.display == "7"
    assert app.calc.history_text == "7 +"
    type_keys(app, "5", "=")
    assert app.calc.display == "12"


def test_escape_clears_and_backspace_deletes(app):
    type_keys(app, "1", "2", "Backspace")
    assert app.calc.display == "1"
    type_keys(app, "Escape")
    assert app.calc.display == "0"
    assert "todo borrado" in app.voice.messages


def test_equal_without_pending_has_no_feedback(app):
    assert app.process("equal") is False
    assert app.ui.feedback_timer == 0
    assert app.voice.messages == []


def test_unknown_event_is_ignored(app):
    assert app.process("sqrt") is False
    assert app.calc.display == "0"


def test_handle_key_code_quit_and_consumed_keys(app):
    with app.keys.subscribe(app.process):
        assert app.handle_key_code(ord("9")) is True
        assert app.handle_key_code(13) is True
        assert app.handle_key_code(-1) is True
        assert app.handle_key_code(ord("q")) is False
    assert app.calc.display == "9"


def test_voice_toggle_key(app, capsys):
    app.handle_key_code(ord("v"))
    assert app.config.voice_enabled is True
    assert "voz activada" in app.voice.messages
    app.handle_key_code(ord("v"))
    assert app.config.voice_enabled is False
    assert "Voz: DESACTIVADA" in capsys.readouterr().out


def test_frame_has_window_size(app):
    frame = app.frame()
    assert frame.shape == (app.config.window_height, app.config.window_width, 3)
