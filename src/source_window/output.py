"""
Output sinks for source command messages.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import click

from .config import Config
from .models import Message, MessageKind


class OutputSink(ABC):
    """Receives the messages produced by the source command."""

    @abstractmethod
    def emit(self, message: Message) -> None:
        pass

    def error(self, text: str) -> None:
        self.emit(Message(MessageKind.ERROR, text))

    def notice(self, text: str) -> None:
        self.emit(Message(MessageKind.NOTICE, text))


class BufferedSink(OutputSink):
    """Collects messages in memory."""

    def __init__(self):
        self.messages: List[Message] = []

    def emit(self, message: Message) -> None:
        self.messages.append(message)

    def of_kind(self, kind: MessageKind) -> List[Message]:
        return [m for m in self.messages if m.kind == kind]

    def clear(self) -> None:
        self.messages.clear()


class LoggingSink(OutputSink):
    """Forwards messages to a logger."""

    _LEVELS = {
        MessageKind.ERROR: logging.ERROR,
        MessageKind.NOTICE: logging.WARNING,
        MessageKind.INFO: logging.INFO,
        MessageKind.EMPHASIS: logging.INFO,
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("source_window.output")

    def emit(self, message: Message) -> None:
        text = message.text
        if message.kind == MessageKind.EMPHASIS:
            text = f">> {text}"
        self.logger.log(self._LEVELS[message.kind], text)


class ConsoleSink(OutputSink):
    """Writes messages to the terminal through click."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def format(self, message: Message) -> str:
        """Render a message as a single line of (possibly styled) text."""
        if message.kind == MessageKind.ERROR:
            return click.style(f"Error: {message.text}", fg="red")
        if message.kind == MessageKind.NOTICE:
            return click.style(f"Notice: {message.text}", fg="yellow")

        emphasis = message.kind == MessageKind.EMPHASIS
        prefix = ""
        if self.config.show_markers:
            prefix += ">> " if emphasis else "   "
        if self.config.show_line_numbers and message.index is not None:
            prefix += f"{message.index + 1:5d}: "
        line = f"{prefix}{message.text}"
        return click.style(line, bold=True) if emphasis else line

    def emit(self, message: Message) -> None:
        color = None if self.config.use_color else False
        click.echo(self.format(message), color=color)
