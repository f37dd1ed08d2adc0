"""Tests del adaptador de teclado y de la suscripción a eventos."""

import pytest

from calculadora_teclado.keyboard import (
    KEY_EVENTS,
    KeyboardInputSource,
    event_for_key,
    key_name_from_code,
)


# --- Tabla de teclas ---

@pytest.mark.parametrize("key, event_id", [
    ("0", "num_0"),
    ("7", "num_7"),
    (".", "decimal"),
    ("+", "add"),
    ("-", "subtract"),
    ("*", "multiply"),
    ("/", "divide"),
    ("Enter", "equal"),
    ("=", "equal"),
    ("Backspace", "backspace"),
    ("Escape", "clear_all"),
])
def test_recognized_keys(key, event_id):
    assert event_for_key(key) == event_id


@pytest.mark.parametrize("key", ["a", "q", "%", "Tab", "ArrowLeft", ","])
def test_other_keys_are_ignored(key):
    assert event_for_key(key) is None


def test_all_digits_mapped():
    assert all(KEY_EVENTS[str(d)] == f"num_{d}" for d in range(10))


# --- Códigos de cv2.waitKey ---

@pytest.mark.parametrize("code, name", [
    (13, "Enter"),
    (10, "Enter"),
    (8, "Backspace"),
    (127, "Backspace"),
    (27, "Escape"),
    (ord("5"), "5"),
    (ord("+"), "+"),
    (ord("q"), "q"),
    (0x100000 | ord("3"), "3"),
])
def test_key_name_from_code(code, name):
    assert key_name_from_code(code) == name


@pytest.mark.parametrize("code", [-1, 255, 0, 200])
def test_key_name_from_code_without_key(code):
    assert key_name_from_code(code) is None


# --- Fuente de eventos ---

def test_feed_key_delivers_to_listener():
    source = KeyboardInputSource()
    received = []
    source.subscribe(received.append)
    assert source.feed_key("5") is True
    assert source.feed_key("Enter") is True
    assert received == ["num_5", "equal"]


def test_ignored_key_is_not_consumed():
    source = KeyboardInputSource()
    received = []
    source.subscribe(received.append)
    assert source.feed_key("q") is False
    assert source.feed_key_code(-1) is False
    assert received == []


def test_feed_key_code():
    source = KeyboardInputSource()
    received = []
    source.subscribe(received.append)
    assert source.feed_key_code(27) is True
    assert source.feed_key_code(ord("*")) is True
    assert received == ["clear_all", "multiply"]


def test_events_keep_arrival_order_across_listeners():
    source = KeyboardInputSource()
    log = []
    source.subscribe(lambda e: log.append(("a", e)))
    source.subscribe(lambda e: log.append(("b", e)))
    source.feed_key("1")
    source.feed_key("2")
    assert log == [("a", "num_1"), ("b", "num_1"), ("a", "num_2"), ("b", "num_2")]


def test_subscription_context_unsubscribes():
    source = KeyboardInputSource()
    received = []
    with source.subscribe(received.append) as subscription:
        source.feed_key("1")
        assert subscription.active
    source.feed_key("2")
    assert received == ["num_1"]
    assert source.listener_count == 0
    assert not subscription.active


def test_subscription_unsubscribes_on_error():
    source = KeyboardInputSource()
    with pytest.raises(RuntimeError):
        with source.subscribe(lambda e: None):
            raise RuntimeError("boom")
    assert source.listener_count == 0


def test_close_twice_is_harmless():
    source = KeyboardInputSource()
    received = []
    subscription = source.subscribe(received.append)
    other = source.subscribe(lambda e: None)
    subscription.close()
    subscription.close()
    assert source.listener_count == 1
    other.close()
    assert source.listener_count == 0
