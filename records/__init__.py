"""Appointment records and the in-memory store that owns them."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List, Optional

from records import ordering

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 10
FIRST_APPOINTMENT_ID = 1001
ACTIVE_STATUS = "Active"


class AppointmentNotFoundError(LookupError):
    """Raised when no appointment carries the requested identifier."""

    def __init__(self, appointment_id: int) -> None:
        super().__init__(f"ID {appointment_id} not found.")
        self.appointment_id = appointment_id


@dataclass
class AppointmentRecord:
    """Data model for a scheduled appointment."""

    appointment_id: int
    patient_name: str
    doctor_name: str
    date: str
    time: str
    status: str = ACTIVE_STATUS

    @property
    def composite_key(self) -> str:
        return f"{self.date} {self.time}"

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


class AppointmentStore:
    """Growable in-memory collection of appointments for one session."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be a positive integer")
        self._records: List[AppointmentRecord] = []
        self._capacity = capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AppointmentRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> AppointmentRecord:
        return self._records[index]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> List[AppointmentRecord]:
        return list(self._records)

    def generate_id(self) -> int:
        # O(n) per insert; ids must stay max + 1 so the scan is kept.
        if not self._records:
            return FIRST_APPOINTMENT_ID
        return max(record.appointment_id for record in self._records) + 1

    def add(self, record: AppointmentRecord) -> int:
        record.appointment_id = self.generate_id()
        self.append_loaded(record)
        return record.appointment_id

    def append_loaded(self, record: AppointmentRecord) -> None:
        """Append a record that already carries its identifier."""

        if len(self._records) == self._capacity:
            self._grow()
        self._records.append(record)

    def find_by_id(self, appointment_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.appointment_id == appointment_id:
                return index
        return None

    def get(self, appointment_id: int) -> AppointmentRecord:
        index = self.find_by_id(appointment_id)
        if index is None:
            raise AppointmentNotFoundError(appointment_id)
        return self._records[index]

    def update_status(self, appointment_id: int, new_status: str) -> AppointmentRecord:
        record = self.get(appointment_id)
        record.status = new_status
        return record

    def sort_by_datetime(self) -> None:
        ordering.sort_by_datetime(self._records)

    def find_by_date(self, target_date: str) -> Optional[int]:
        """Binary search by date; the store must be sorted first."""

        return ordering.binary_search_by_date(self._records, target_date)

    def _grow(self) -> None:
        # The list reallocates itself; a MemoryError from it is fatal and
        # callers must not persist afterwards.
        new_capacity = self._capacity * 2
        logger.debug("Growing appointment store from %d to %d", self._capacity, new_capacity)
        self._capacity = new_capacity


__all__ = [
    "ACTIVE_STATUS",
    "AppointmentNotFoundError",
    "AppointmentRecord",
    "AppointmentStore",
    "FIRST_APPOINTMENT_ID",
    "INITIAL_CAPACITY",
]
