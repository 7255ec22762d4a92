"""Scheduling operations exposed to the console and dashboard."""

from .appointments import (
    appointments_on,
    change_status,
    create_appointment,
    is_valid_time,
    list_appointments,
    search_by_date,
)
from .reporting import ClinicStats, compute_stats, generate_clinic_report

__all__ = [
    "ClinicStats",
    "appointments_on",
    "change_status",
    "compute_stats",
    "create_appointment",
    "generate_clinic_report",
    "is_valid_time",
    "list_appointments",
    "search_by_date",
]
