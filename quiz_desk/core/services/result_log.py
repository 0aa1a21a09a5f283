"""Service persisting completed attempts to the append-only CSV result log."""

from __future__ import annotations

import logging
from pathlib import Path
import shutil

from quiz_desk.core import result_codec
from quiz_desk.core.errors import MalformedRecordError, PersistenceError
from quiz_desk.core.models import ResultRecord

logger = logging.getLogger(__name__)


class ResultLog:
    """Flat file of result records with a header row.

    Each call opens and closes the file; no lock is held between calls.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def append(self, record: ResultRecord) -> None:
        """Append one record, writing the header first if the log is new."""
        try:
            write_header = not self._path.exists()
            if write_header:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8", newline="") as handle:
                if write_header:
                    handle.write(result_codec.header_line())
                handle.write(result_codec.encode(record))
                handle.flush()
        except OSError as exc:
            raise PersistenceError(f"Failed to save result: {exc}") from exc
        logger.info("Saved result for %s (%d%%) to %s", record.email, record.score_percent, self._path)

    def load_all(self) -> list[ResultRecord]:
        """Return every decodable record in file order; malformed rows are skipped.

        A record may span several physical lines when a quoted field holds a
        line break. When a record cannot be decoded only its first line is
        dropped and parsing resumes on the next line, so one damaged row
        never hides later ones.
        """
        if not self._path.exists():
            return []
        try:
            lines = self._path.read_bytes().splitlines(keepends=True)
        except OSError as exc:
            raise PersistenceError(f"Failed to load results: {exc}") from exc

        records: list[ResultRecord] = []
        index = 1  # line 0 is the header
        while index < len(lines):
            if not lines[index].strip():
                index += 1
                continue
            end = _record_end(lines, index)
            try:
                if end is None:
                    raise MalformedRecordError("Quoted field is never closed.")
                text = b"".join(lines[index:end]).decode("utf-8")
                records.append(result_codec.decode(text))
            except (MalformedRecordError, UnicodeDecodeError) as exc:
                logger.warning("Skipping malformed row at line %d in %s: %s", index + 1, self._path, exc)
                index += 1
                continue
            index = end
        return records

    def clear_all(self) -> None:
        """Delete the log file. Irreversible; a missing file is not an error."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Failed to clear results: {exc}") from exc
        logger.info("Cleared result log %s", self._path)

    def export_copy(self, destination: Path) -> Path:
        """Copy the log byte-for-byte to ``destination``, replacing any existing file."""
        destination = Path(destination)
        if not self._path.exists():
            raise PersistenceError("There are no saved results to export.")
        try:
            shutil.copyfile(self._path, destination)
        except OSError as exc:
            raise PersistenceError(f"Export failed: {exc}") from exc
        logger.info("Exported result log to %s", destination)
        return destination


def _record_end(lines: list[bytes], start: int) -> int | None:
    """Index just past the last line of the record starting at ``start``.

    Quotes are balanced once a record is complete, since doubled inner quotes
    come in pairs. ``None`` means the file ends inside a quoted field.
    """
    quotes = 0
    for end in range(start, len(lines)):
        quotes += lines[end].count(b'"')
        if quotes % 2 == 0:
            return end + 1
    return None
