"""Logging formatters for engine call output."""

import logging


class StreamFormatter(logging.Formatter):
    """Logging formatter that prepends stream and operation tags from extra parameters."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with stream and operation prefixes if present.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message, ``[stream] [operation] message`` with each
            tag omitted when its extra is absent
        """
        msg = super().format(record)
        operation = getattr(record, "operation", None)
        stream = getattr(record, "stream", None)

        if operation:
            msg = f"[{operation}] {msg}"

        if stream == "stdout":
            return f"[stdout] {msg}"
        elif stream == "stderr":
            return f"[stderr] {msg}"

        return msg
