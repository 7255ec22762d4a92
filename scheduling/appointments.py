"""Appointment operations offered to the clinic front desk."""

from __future__ import annotations

import logging
import string
from typing import List, Optional

from records import ACTIVE_STATUS, AppointmentRecord, AppointmentStore
from records.csv_file import FIELD_DELIMITER
from records.ordering import date_run

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 99
MAX_STATUS_LENGTH = 19
STATUS_CHOICES = ("Active", "Cancelled", "Done")


def is_valid_time(text: str) -> bool:
    """Check ``HH:MM`` shape only; ``99:99`` is accepted."""

    if not isinstance(text, str) or len(text) != 5 or text[2] != ":":
        return False
    return all(char in string.digits for index, char in enumerate(text) if index != 2)


def _validate_text(value: str, label: str, max_length: int = MAX_NAME_LENGTH) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{label} must be a non-empty string")
    value = value.strip()
    if len(value) > max_length:
        raise ValueError(f"{label} must be at most {max_length} characters")
    if FIELD_DELIMITER in value or "\n" in value or "\r" in value:
        raise ValueError(f"{label} must not contain '{FIELD_DELIMITER}' or line breaks")
    return value


def create_appointment(
    store: AppointmentStore,
    patient_name: str,
    doctor_name: str,
    date: str,
    time: str,
) -> AppointmentRecord:
    """Validate the entry fields and add an active appointment to ``store``."""

    patient_name = _validate_text(patient_name, "patient_name")
    doctor_name = _validate_text(doctor_name, "doctor_name")
    date = _validate_text(date, "date")
    time = time.strip() if isinstance(time, str) else time
    if not is_valid_time(time):
        raise ValueError("Invalid HH:MM format!")

    record = AppointmentRecord(
        appointment_id=0,
        patient_name=patient_name,
        doctor_name=doctor_name,
        date=date,
        time=time,
        status=ACTIVE_STATUS,
    )
    store.add(record)
    logger.info("Appointment %d created for %s on %s %s", record.appointment_id, patient_name, date, time)
    return record


def list_appointments(store: AppointmentStore) -> List[AppointmentRecord]:
    """Return every appointment in chronological order."""

    store.sort_by_datetime()
    return store.records


def search_by_date(store: AppointmentStore, date: str) -> Optional[AppointmentRecord]:
    store.sort_by_datetime()
    index = store.find_by_date(date.strip())
    if index is None:
        return None
    return store[index]


def appointments_on(store: AppointmentStore, date: str) -> List[AppointmentRecord]:
    """Return all appointments scheduled on ``date``, earliest first."""

    store.sort_by_datetime()
    records = store.records
    index = store.find_by_date(date.strip())
    if index is None:
        return []
    return [records[position] for position in date_run(records, index)]


def change_status(store: AppointmentStore, appointment_id: int, status: str) -> AppointmentRecord:
    """Overwrite the status of an appointment.

    Any single-line text up to ``MAX_STATUS_LENGTH`` characters is accepted.
    """

    if not isinstance(status, str) or not status.strip():
        raise ValueError("status must be a non-empty string")
    status = status.strip()
    if len(status) > MAX_STATUS_LENGTH:
        raise ValueError(f"status must be at most {MAX_STATUS_LENGTH} characters")
    if "\n" in status or "\r" in status:
        raise ValueError("status must not contain line breaks")
    record = store.update_status(appointment_id, status)
    logger.info("Appointment %d status set to %s", appointment_id, record.status)
    return record


__all__ = [
    "MAX_NAME_LENGTH",
    "MAX_STATUS_LENGTH",
    "STATUS_CHOICES",
    "appointments_on",
    "change_status",
    "create_appointment",
    "is_valid_time",
    "list_appointments",
    "search_by_date",
]
