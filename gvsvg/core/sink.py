"""Byte sink the renderer writes its document into."""

import gzip
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union


logger = logging.getLogger(__name__)


class OutputSink:
    """
    Unbuffered UTF-8 writer over a binary stream.

    The first failure of the underlying stream is kept in ``error`` and
    logged; every write after that is dropped. Callers that care check
    ``error`` once the document is finished.
    """

    def __init__(self, stream: BinaryIO, owned: bool = False, compressed: bool = False):
        self._raw = stream
        self._owned = owned
        self.compressed = compressed
        self.stream: BinaryIO = gzip.GzipFile(fileobj=stream, mode="wb") if compressed else stream
        self.error: Optional[Exception] = None

    def write(self, text: str) -> None:
        if self.error is not None:
            return
        try:
            self.stream.write(text.encode("utf-8"))
        except (OSError, ValueError) as e:
            self.error = e
            logger.error("Output write failed, discarding the rest of the document: %s", e)

    def close(self) -> None:
        try:
            if self.compressed:
                self.stream.close()
            if self._owned:
                self._raw.close()
            else:
                self._raw.flush()
        except (OSError, ValueError) as e:
            if self.error is None:
                self.error = e
                logger.error("Closing output failed: %s", e)

    def __enter__(self) -> "OutputSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_sink(target: Union[str, Path, BinaryIO], compressed: bool = False) -> OutputSink:
    """Open a sink on a file path or on an already open binary stream."""
    if isinstance(target, (str, Path)):
        return OutputSink(open(target, "wb"), owned=True, compressed=compressed)
    return OutputSink(target, compressed=compressed)
