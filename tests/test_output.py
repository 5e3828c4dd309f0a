"""
Test module for output sinks.
"""
import logging
import click
from source_window.config import Config
from source_window.models import Message, MessageKind
from source_window.output import BufferedSink, ConsoleSink, LoggingSink


def test_buffered_sink_collects_messages():
    """Test collecting and filtering messages."""
    sink = BufferedSink()
    sink.error("bad")
    sink.notice("stale")
    sink.emit(Message(MessageKind.INFO, "text", 0))

    assert [m.kind for m in sink.messages] == [MessageKind.ERROR, MessageKind.NOTICE, MessageKind.INFO]
    assert sink.of_kind(MessageKind.NOTICE)[0].text == "stale"
    sink.clear()
    assert sink.messages == []


def test_console_sink_format_plain():
    """Test console formatting without color."""
    sink = ConsoleSink()
    assert click.unstyle(sink.format(Message(MessageKind.ERROR, "bad"))) == "Error: bad"
    assert click.unstyle(sink.format(Message(MessageKind.NOTICE, "stale"))) == "Notice: stale"
    assert sink.format(Message(MessageKind.INFO, "x = 1", 3)) == "   x = 1"
    assert click.unstyle(sink.format(Message(MessageKind.EMPHASIS, "x = 2", 4))) == ">> x = 2"


def test_console_sink_styles_emphasis():
    """Test the emphasis line is styled."""
    styled = ConsoleSink().format(Message(MessageKind.EMPHASIS, "x = 2", 4))
    assert styled != click.unstyle(styled)


def test_console_sink_line_numbers():
    """Test the optional line number gutter."""
    config = Config()
    config.show_line_numbers = True
    sink = ConsoleSink(config)
    assert click.unstyle(sink.format(Message(MessageKind.EMPHASIS, "x = 2", 4))) == ">>     5: x = 2"


def test_logging_sink_levels(caplog):
    """Test message kinds map to logging levels."""
    sink = LoggingSink(logging.getLogger("test.output"))
    with caplog.at_level(logging.INFO, logger="test.output"):
        sink.error("bad")
        sink.notice("stale")
        sink.emit(Message(MessageKind.EMPHASIS, "current", 1))

    assert [(r.levelname, r.message) for r in caplog.records] == [
        ("ERROR", "bad"),
        ("WARNING", "stale"),
        ("INFO", ">> current"),
    ]
