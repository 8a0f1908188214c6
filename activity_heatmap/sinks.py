"""Destinations for encoded chart bytes, picked by the caller."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union

from . import settings

log = logging.getLogger(__name__)


class Sink(Protocol):  # pragma: no cover - structural only
    def write(self, content: bytes) -> None: ...


class StdoutSink:
    def __init__(self, stream: Optional[BinaryIO] = None):
        self.stream = stream

    def write(self, content: bytes) -> None:
        stream = self.stream if self.stream is not None else sys.stdout.buffer
        stream.write(content)
        stream.flush()


class FileSink:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, content: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(content)
        log.info("Saved %s", self.path)


def select_sink(debug: bool = settings.DEBUG_CHART, path: Union[str, Path] = settings.DEBUG_CHART_FILE) -> Sink:
    """Debug runs write the chart to a local file instead of stdout."""
    if debug:
        return FileSink(path)
    return StdoutSink()
