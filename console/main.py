"""Interactive front-desk console for the clinic scheduler."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

if __package__ is None or __package__ == "":  # pragma: no cover - runtime safety for script execution
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from records import AppointmentRecord, AppointmentStore
from records.csv_file import DEFAULT_DATA_FILE, PersistenceError, load_store, save_store
from scheduling.appointments import (
    STATUS_CHOICES,
    change_status,
    create_appointment,
    is_valid_time,
    list_appointments,
    search_by_date,
)
from scheduling.reporting import compute_stats, generate_clinic_report

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = os.getenv("CLINIC_LOG_LEVEL", "WARNING")

TITLE = "ADVANCED CLINIC SCHEDULER V3.0"
RULE = "=" * 50
MENU_OPTIONS = (
    "1. New Appointment",
    "2. List All (Auto-Sorted)",
    "3. Binary Search by Date",
    "4. Update/Cancel Appointment",
    "5. System Statistics",
    "6. Save and Exit",
)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_SAVE_FAILED = 2


def format_header(title: str) -> List[str]:
    return [RULE, f"  {title}", RULE]


def format_table(records: Iterable[AppointmentRecord]) -> List[str]:
    lines = [
        f"\n{'ID':<5} | {'Patient':<15} | {'Doctor':<12} | {'Date':<10} | {'Time':<5} | {'Status':<10}",
        "-" * 70,
    ]
    for record in records:
        lines.append(
            f"{record.appointment_id:<5} | {record.patient_name[:15]:<15} | "
            f"{record.doctor_name[:12]:<12} | {record.date:<10} | {record.time:<5} | {record.status:<10}"
        )
    return lines


def format_search_result(record: Optional[AppointmentRecord]) -> str:
    if record is None:
        return "\nNo appointments found on this date."
    return f"\nFound! ID {record.appointment_id}: {record.patient_name} at {record.time}"


def format_stats(store: AppointmentStore) -> List[str]:
    stats = compute_stats(store)
    return format_header("CLINIC REPORT") + [
        f"Total Records: {stats.total}",
        f"Active Appointments: {stats.active}",
        f"Inactive/Cancelled: {stats.inactive}",
    ]


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class ClinicConsole:
    """Numbered menu loop operating on a single appointment store."""

    def __init__(
        self,
        store: AppointmentStore,
        data_path: Path,
        *,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        clear: bool = True,
    ) -> None:
        self._store = store
        self._data_path = data_path
        self._input = input_func
        self._output = output_func
        self._clear = clear
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.add_appointment,
            2: self.list_all,
            3: self.search,
            4: self.update_status,
            5: self.show_stats,
        }

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._output(line)

    def run(self) -> int:
        """Run the menu until the user saves and exits; return the exit code."""

        try:
            while True:
                if self._clear:
                    clear_screen()
                self._emit(format_header(TITLE))
                self._emit(MENU_OPTIONS)
                raw_choice = self._input("\nEnter Choice (1-6): ")
                try:
                    choice = int(raw_choice.strip())
                except ValueError:
                    continue

                if choice == 6:
                    return self.save_and_exit()
                handler = self._handlers.get(choice)
                if handler is None:
                    self._output("Invalid choice. Please enter a number from 1 to 6.")
                else:
                    handler()
                self._input("\nPress Enter to continue...")
        except EOFError:
            self._output("")
            return self.save_and_exit()

    def add_appointment(self) -> None:
        patient_name = self._input("Patient Name: ")
        doctor_name = self._input("Doctor Name: ")
        date = self._input("Date (YYYY-MM-DD): ")
        while True:
            time = self._input("Time (HH:MM): ").strip()
            if is_valid_time(time):
                break
            self._output("Invalid HH:MM format!")

        try:
            record = create_appointment(self._store, patient_name, doctor_name, date, time)
        except ValueError as exc:
            self._output(f"[ERROR] {exc}")
            return
        self._output(f"[SUCCESS] Appointment {record.appointment_id} created.")

    def list_all(self) -> None:
        self._emit(format_table(list_appointments(self._store)))

    def search(self) -> None:
        target_date = self._input("Search Date (YYYY-MM-DD): ")
        self._output(format_search_result(search_by_date(self._store, target_date)))

    def update_status(self) -> None:
        while True:
            raw_id = self._input("Enter Appointment ID: ")
            try:
                appointment_id = int(raw_id.strip())
                break
            except ValueError:
                self._output("Appointment ID must be a number.")

        if self._store.find_by_id(appointment_id) is None:
            self._output(f"ID {appointment_id} not found.")
            return

        status = self._input(f"New Status ({'/'.join(STATUS_CHOICES)}): ")
        try:
            change_status(self._store, appointment_id, status)
        except ValueError as exc:
            self._output(f"[ERROR] {exc}")
            return
        self._output("Update complete.")

    def show_stats(self) -> None:
        self._emit(format_stats(self._store))

    def save_and_exit(self) -> int:
        try:
            saved = save_store(self._store, self._data_path)
        except PersistenceError as exc:
            LOGGER.error("Failed to save appointments: %s", exc)
            self._output(f"[ERROR] {exc}")
            return EXIT_SAVE_FAILED
        self._output(f"\n[SYSTEM] {saved} records saved to {self._data_path}.")
        return EXIT_OK


def run_menu(data_path: Path, *, clear: bool = True) -> int:
    store = load_store(data_path)
    return ClinicConsole(store, data_path, clear=clear).run()


def run_list(data_path: Path) -> int:
    for line in format_table(list_appointments(load_store(data_path))):
        print(line)
    return EXIT_OK


def run_search(data_path: Path, target_date: str) -> int:
    print(format_search_result(search_by_date(load_store(data_path), target_date)))
    return EXIT_OK


def run_stats(data_path: Path) -> int:
    for line in format_stats(load_store(data_path)):
        print(line)
    return EXIT_OK


def run_report(data_path: Path) -> int:
    report_path = generate_clinic_report(load_store(data_path))
    print(f"Clinic report is ready: {report_path}")
    return EXIT_OK


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Clinic appointment scheduler")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("menu", "list", "search", "stats", "report"),
        default="menu",
        help="Command to execute",
    )
    parser.add_argument("date", nargs="?", help="Date to search for (YYYY-MM-DD)")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help="Appointment data file (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between menu screens",
    )
    args = parser.parse_args(argv)
    if args.command == "search" and not args.date:
        parser.error("the search command requires a date")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        if args.command == "list":
            return run_list(args.data_file)
        if args.command == "search":
            return run_search(args.data_file, args.date)
        if args.command == "stats":
            return run_stats(args.data_file)
        if args.command == "report":
            return run_report(args.data_file)
        return run_menu(args.data_file, clear=not args.no_clear)
    except MemoryError:
        LOGGER.critical("Out of memory while growing the appointment store; nothing was saved")
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
