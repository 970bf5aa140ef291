"""Logging filters routing records to stdout or stderr."""

import logging


class StreamRoutingFilter(logging.Filter):
    """Pass only the records belonging to one output stream.

    A record carrying a ``stream`` extra goes to that stream. Other records
    go to stderr from WARNING up and to stdout below.

    Parameters
    ----------
    stream : str
        Stream this filter guards, ``stdout`` or ``stderr``
    """

    def __init__(self, stream: str) -> None:
        super().__init__()
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"stream must be 'stdout' or 'stderr', got {stream!r}")
        self.stream = stream

    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "stream", None)

        if target is None:
            target = "stderr" if record.levelno >= logging.WARNING else "stdout"

        return target == self.stream
