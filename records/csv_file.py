"""Flat-file persistence for the appointment store.

Each appointment occupies one line of six comma-separated fields::

    id,patient_name,doctor_name,date,time,status

There is no header and no quoting, so a field that contains a comma cannot be
read back faithfully. Lines that fail to parse are skipped when loading.
"""
from __future__ import annotations

import logging
import os
import string
from pathlib import Path
from typing import Optional, Union

from records import AppointmentRecord, AppointmentStore

__all__ = [
    "DEFAULT_DATA_FILE",
    "FIELD_DELIMITER",
    "PersistenceError",
    "format_line",
    "load_store",
    "parse_line",
    "save_store",
]

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
FIELD_COUNT = 6

DEFAULT_DATA_FILE = Path(os.getenv("CLINIC_DATA_FILE", "clinic_data.csv"))


class PersistenceError(RuntimeError):
    """Raised when the data file cannot be read or written."""


def parse_line(line: Union[str, bytes]) -> Optional[AppointmentRecord]:
    """Parse one persisted line, returning ``None`` when it is malformed.

    Raw bytes are decoded as UTF-8; a line that does not decode is malformed.
    """

    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError:
            return None
    content = line.rstrip("\r\n")
    fields = content.split(FIELD_DELIMITER, FIELD_COUNT - 1)
    if len(fields) != FIELD_COUNT:
        return None
    raw_id, patient_name, doctor_name, date, time, status = fields
    if not raw_id or not all(char in string.digits for char in raw_id):
        return None
    appointment_id = int(raw_id)
    if not all((patient_name, doctor_name, date, time, status)):
        return None
    return AppointmentRecord(
        appointment_id=appointment_id,
        patient_name=patient_name,
        doctor_name=doctor_name,
        date=date,
        time=time,
        status=status,
    )


def format_line(record: AppointmentRecord) -> str:
    return FIELD_DELIMITER.join(
        (
            str(record.appointment_id),
            record.patient_name,
            record.doctor_name,
            record.date,
            record.time,
            record.status,
        )
    )


def load_store(
    path: Union[Path, str, None] = None, store: Optional[AppointmentStore] = None
) -> AppointmentStore:
    """Load appointments from ``path`` into ``store`` (a new one by default).

    A missing file is not an error: the store simply stays empty.
    """

    data_path = Path(path) if path is not None else DEFAULT_DATA_FILE
    store = store if store is not None else AppointmentStore()
    if not data_path.exists():
        logger.info("No data file at %s; starting with an empty schedule", data_path)
        return store

    loaded = 0
    skipped = 0
    try:
        with data_path.open("rb") as handle:
            for line_number, line in enumerate(handle, start=1):
                record = parse_line(line)
                if record is None:
                    skipped += 1
                    logger.debug("Skipping malformed line %d in %s: %r", line_number, data_path, line)
                    continue
                store.append_loaded(record)
                loaded += 1
    except OSError as exc:
        raise PersistenceError(f"Failed to read appointments from {data_path}: {exc}") from exc

    logger.info("Loaded %d appointments from %s (%d lines skipped)", loaded, data_path, skipped)
    return store


def save_store(store: AppointmentStore, path: Union[Path, str, None] = None) -> int:
    """Overwrite ``path`` with every appointment in current store order."""

    data_path = Path(path) if path is not None else DEFAULT_DATA_FILE
    try:
        data_dir = data_path.parent
        if data_dir and not data_dir.exists():
            data_dir.mkdir(parents=True, exist_ok=True)
        with data_path.open("w", encoding="utf-8", newline="") as handle:
            for record in store:
                handle.write(f"{format_line(record)}\n")
    except OSError as exc:
        raise PersistenceError(f"Failed to write appointments to {data_path}: {exc}") from exc

    logger.info("%d records saved to %s", len(store), data_path)
    return len(store)
