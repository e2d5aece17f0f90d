"""Tests for the assistant signal channel."""

from assistant import AssistantChannel


def test_emit_calls_receivers_in_order():
    channel = AssistantChannel()
    calls = []
    channel.connect(lambda: calls.append("first"))
    channel.connect(lambda: calls.append("second"))
    assert channel.emit() == 2
    assert calls == ["first", "second"]


def test_emit_without_receivers():
    assert AssistantChannel().emit() == 0


def test_connect_as_decorator():
    channel = AssistantChannel("help")
    hits = []

    @channel.connect
    def open_panel():
        hits.append(1)

    assert callable(open_panel)
    assert channel.receivers == [open_panel]
    channel.emit()
    channel.emit()
    assert hits == [1, 1]


def test_connect_twice_registers_once():
    channel = AssistantChannel()
    hits = []

    def receiver():
        hits.append(1)

    channel.connect(receiver)
    channel.connect(receiver)
    channel.emit()
    assert hits == [1]


def test_disconnect():
    channel = AssistantChannel()
    hits = []

    def receiver():
        hits.append(1)

    channel.connect(receiver)
    channel.disconnect(receiver)
    channel.disconnect(receiver)
    assert channel.emit() == 0
    assert hits == []
