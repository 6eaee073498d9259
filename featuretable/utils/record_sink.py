from __future__ import annotations

import csv
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, TextIO

from ..config import DEFAULT_DIALECT, STDOUT_PATH, TblDialect
from .exceptions import FieldFormatError, SinkWriteError

log = logging.getLogger(__name__)


class TblRecordSink:
    """Writes rows of text fields as tab separated lines.

    Rows may have different lengths and nothing is quoted or escaped. A field
    holding the delimiter or a line break is rejected with
    :class:`FieldFormatError` rather than written.
    """

    def __init__(self, stream: TextIO, dialect: TblDialect = DEFAULT_DIALECT) -> None:
        self.stream = stream
        self.dialect = dialect
        self._writer = csv.writer(
            stream,
            delimiter=dialect.delimiter,
            lineterminator=dialect.lineterminator,
            quoting=csv.QUOTE_NONE,
            quotechar=None,
            escapechar=None,
        )

    def write_record(self, fields: Sequence[str]) -> None:
        forbidden = (self.dialect.delimiter, "\n", "\r")
        for field in fields:
            if any(char in field for char in forbidden):
                raise FieldFormatError(f"cannot write row {list(fields)!r}: field {field!r} needs escaping")
        try:
            self._writer.writerow(fields)
        except csv.Error as exc:
            raise FieldFormatError(f"cannot write row {list(fields)!r}: {exc}") from exc
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"failed to write row: {exc}") from exc

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"failed to flush output: {exc}") from exc


@contextmanager
def open_output(path: str | Path, dialect: TblDialect = DEFAULT_DIALECT) -> Iterator[TextIO]:
    """Open ``path`` for writing, or use standard output for ``-``.

    Files are closed on every exit path; standard output is only flushed.
    """
    if str(path) == STDOUT_PATH:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = path.open("w", encoding=dialect.encoding, newline="")
    except OSError as exc:
        raise SinkWriteError(f"cannot open {path} for writing: {exc}") from exc
    log.info("writing feature table to %s", path)
    with handle:
        yield handle
