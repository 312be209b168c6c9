# tasks/importer.py
import csv
import datetime
import logging
from dataclasses import dataclass
from pathlib import Path

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import SourceReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskRow:
    """One record of the import source."""

    title: object = None
    description: object = None
    completed_at: object = None


def parse_completed_at(raw):
    """
    Parse a ``completed_at`` cell.

    Blank cells mean "not completed". Datetimes without an offset are taken
    as UTC and plain dates as midnight UTC. Returns None for blank input and
    raises ValueError for anything unparseable.
    """
    if raw is None or not raw.strip():
        return None
    raw = raw.strip()
    value = parse_datetime(raw)
    if value is None:
        day = parse_date(raw)
        if day is None:
            raise ValueError(f'Invalid completed_at value: {raw!r}')
        value = datetime.datetime.combine(day, datetime.time.min)
    if timezone.is_naive(value):
        value = timezone.make_aware(value, datetime.timezone.utc)
    return value


def read_task_rows(path):
    """
    Read task rows from the CSV file at ``path``.

    The first line is the header. Only the ``title``, ``description`` and
    ``completed_at`` columns are used; missing columns read as None.

    Raises:
        SourceReadError: the file is missing or unreadable, or a row holds an
            invalid ``completed_at``.
    """
    path = Path(path)
    rows = []
    try:
        with path.open(newline='', encoding='utf-8') as fh:
            for line_no, record in enumerate(csv.DictReader(fh), start=2):
                try:
                    completed_at = parse_completed_at(record.get('completed_at'))
                except ValueError as exc:
                    logger.warning('%s line %d: %s', path, line_no, exc)
                    raise SourceReadError()
                rows.append(TaskRow(
                    title=record.get('title'),
                    description=record.get('description'),
                    completed_at=completed_at,
                ))
    except (OSError, csv.Error, UnicodeDecodeError) as exc:
        logger.error('Cannot read import file %s: %s', path, exc)
        raise SourceReadError()

    logger.debug('Read %d rows from %s', len(rows), path)
    return rows
