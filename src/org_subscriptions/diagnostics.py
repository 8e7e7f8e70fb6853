"""
Sinks for human-readable progress and warning messages.

Diagnostics never go to stdout, which is reserved for primary results so that
the commands can be composed in pipelines.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol
import click


class DiagnosticSink(Protocol):
    def emit(self, line: str) -> None:
        ...


class ConsoleSink:
    """Writes each line to stderr immediately"""

    def emit(self, line: str) -> None:
        click.echo(line, err=True)


@dataclass
class BufferSink:
    lines: list[str] = field(default_factory=list)

    def emit(self, line: str) -> None:
        self.lines.append(line)


def default_sink(sink: DiagnosticSink | None) -> DiagnosticSink:
    return sink if sink is not None else ConsoleSink()
