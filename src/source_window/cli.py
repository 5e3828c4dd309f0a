"""
Command-line interface for the source window command.
"""
import sys
import json
import logging
import click
from typing import Tuple

from source_window.commands import SourceCommand
from source_window.config import Config
from source_window.errors import ErrorHandler
from source_window.output import BufferedSink, ConsoleSink
from source_window.session import StaticSession, UNKNOWN_LINE

# Global error handler instance
error_handler = ErrorHandler()


class ClickEchoHandler(logging.Handler):
    """Logging handler writing through click so it follows the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging (INFO level)')
@click.option('--debug', is_flag=True, help='Enable debug logging (DEBUG level)')
@click.pass_context
def cli(ctx, verbose: bool, debug: bool):
    """Debugger source window tool."""
    # Initialize global logging once; default WARNING
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    handler_found = False
    for h in list(root_logger.handlers):
        if getattr(h, "_source_window_cli", False):
            handler_found = True
            h.setLevel(level)
    if not handler_found:
        h = ClickEchoHandler()
        h.setLevel(level)
        h.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        setattr(h, "_source_window_cli", True)
        root_logger.addHandler(h)
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = level


@cli.command(
    context_settings={"ignore_unknown_options": True},
    help=SourceCommand.help,
    short_help=SourceCommand.summary,
)
@click.option('--file', 'file_name', type=str, default=None, help='Source file of the active frame')
@click.option('--line', type=int, default=UNKNOWN_LINE, show_default=True,
              help='Line of the active frame (-1 means unknown)')
@click.option('--executable', type=str, default=None, help='Debuggee executable for the staleness check')
@click.option('--config', default='source_window.json', help='Configuration file')
@click.option('--json', 'json_output', is_flag=True, help='Output messages as JSON')
@click.argument('bounds', nargs=-1, type=click.UNPROCESSED)
def source(file_name: str | None, line: int, executable: str | None, config: str,
           json_output: bool, bounds: Tuple[str, ...]):
    """Show the source for the current stack frame."""
    cfg = Config.from_file(config)
    session = StaticSession.from_values(file_name, line, executable)
    command = SourceCommand(error_handler, cfg)

    if json_output:
        sink = BufferedSink()
        result = command.process(" ".join(bounds), session, sink)
        output = {
            "messages": [m.to_dict() for m in sink.messages],
            "result": result.get_summary(),
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        result = command.process(" ".join(bounds), session, ConsoleSink(cfg))

    if not result.is_successful():
        sys.exit(1)


# Register the short alias
cli.add_command(source, name='src')


if __name__ == "__main__":
    cli()
