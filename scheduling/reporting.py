"""Clinic statistics and the printable clinic report.

The statistics split the schedule into active appointments (status exactly
``Active``) and everything else. The same figures can be rendered into a
one-page PDF with ReportLab for handing to clinic staff.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from records import ACTIVE_STATUS, AppointmentStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClinicStats:
    """Aggregate appointment counts."""

    total: int
    active: int
    inactive: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def compute_stats(store: AppointmentStore) -> ClinicStats:
    total = len(store)
    active = sum(1 for record in store if record.status == ACTIVE_STATUS)
    return ClinicStats(total=total, active=active, inactive=total - active)


def _reports_dir() -> Path:
    """Return the reports output directory, creating it if necessary.

    The directory can be overridden via the ``CLINIC_REPORT_DIR`` environment
    variable.
    """

    reports_path = Path(os.getenv("CLINIC_REPORT_DIR", "reports"))
    reports_path.mkdir(parents=True, exist_ok=True)
    return reports_path


def _report_filename(generated_at: datetime) -> Path:
    return _reports_dir() / f"clinic_report_{generated_at.strftime('%Y%m%d-%H%M%S')}.pdf"


def _draw_header(pdf: canvas.Canvas, title: str, generated_at: datetime) -> None:
    pdf.setFont("Helvetica-Bold", 20)
    pdf.drawString(1 * inch, 10.5 * inch, title)
    pdf.setFont("Helvetica", 10)
    pdf.drawString(
        1 * inch,
        10.1 * inch,
        f"Generated on: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
    )


def _draw_stats(pdf: canvas.Canvas, stats: ClinicStats) -> None:
    pdf.setFont("Helvetica-Bold", 12)
    pdf.drawString(1 * inch, 9.5 * inch, "Appointment Summary")

    pdf.setFont("Helvetica", 11)
    pdf.drawString(1.2 * inch, 9.1 * inch, f"Total Records: {stats.total}")
    pdf.drawString(1.2 * inch, 8.8 * inch, f"Active Appointments: {stats.active}")
    pdf.drawString(1.2 * inch, 8.5 * inch, f"Inactive/Cancelled: {stats.inactive}")

    pdf.setFont("Helvetica", 10)
    pdf.drawString(
        1 * inch,
        7.9 * inch,
        f"Notes: only appointments with status '{ACTIVE_STATUS}' are counted as active.",
    )


def create_clinic_report(
    stats: ClinicStats, output_path: Union[Path, str, None] = None
) -> Path:
    generated_at = datetime.now()
    report_path = Path(output_path) if output_path is not None else _report_filename(generated_at)
    report_path.parent.mkdir(parents=True, exist_ok=True)

    pdf = canvas.Canvas(str(report_path), pagesize=letter)
    _draw_header(pdf, "Clinic Report", generated_at)
    _draw_stats(pdf, stats)
    pdf.showPage()
    pdf.save()
    LOGGER.info("Clinic report created at %s", report_path)
    return report_path


def generate_clinic_report(
    store: AppointmentStore, output_path: Optional[Union[Path, str]] = None
) -> Path:
    """Compute statistics for ``store`` and render them to a PDF."""

    return create_clinic_report(compute_stats(store), output_path)


__all__ = ["ClinicStats", "compute_stats", "create_clinic_report", "generate_clinic_report"]
