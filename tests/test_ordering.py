import unittest

from records import AppointmentRecord, AppointmentStore
from records.ordering import binary_search_by_date, date_run, sort_by_datetime


def add(store: AppointmentStore, date: str, time: str, patient: str = "Patient") -> int:
    return store.add(AppointmentRecord(0, patient, "Dr. House", date, time))


class SortByDateTimeTests(unittest.TestCase):
    def test_later_insert_with_earlier_date_sorts_first(self) -> None:
        store = AppointmentStore()
        record_a = add(store, "2024-03-01", "09:00", "A")
        record_b = add(store, "2024-01-10", "14:30", "B")

        store.sort_by_datetime()

        self.assertEqual([record.appointment_id for record in store], [record_b, record_a])
        index = store.find_by_date("2024-01-10")
        self.assertEqual(store[index].appointment_id, record_b)

    def test_orders_by_time_within_a_day(self) -> None:
        store = AppointmentStore()
        add(store, "2024-02-02", "16:00")
        add(store, "2024-02-02", "08:15")
        add(store, "2024-02-01", "23:59")

        store.sort_by_datetime()

        self.assertEqual(
            [record.composite_key for record in store],
            ["2024-02-01 23:59", "2024-02-02 08:15", "2024-02-02 16:00"],
        )

    def test_sorting_is_idempotent(self) -> None:
        store = AppointmentStore()
        for date, time in [
            ("2024-05-01", "10:00"),
            ("2023-12-31", "09:00"),
            ("2024-05-01", "09:30"),
            ("2024-01-15", "12:00"),
        ]:
            add(store, date, time)

        store.sort_by_datetime()
        first_pass = [record.to_dict() for record in store]
        store.sort_by_datetime()

        self.assertEqual([record.to_dict() for record in store], first_pass)

    def test_sort_on_empty_list(self) -> None:
        records = []
        sort_by_datetime(records)
        self.assertEqual(records, [])


class BinarySearchByDateTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = AppointmentStore()
        for date, time in [
            ("2024-04-04", "10:00"),
            ("2024-01-01", "08:00"),
            ("2024-02-14", "11:00"),
            ("2024-02-14", "09:00"),
            ("2024-02-14", "15:00"),
            ("2024-03-30", "13:00"),
        ]:
            add(self.store, date, time)
        self.store.sort_by_datetime()

    def test_finds_every_present_date(self) -> None:
        for date in {record.date for record in self.store}:
            index = self.store.find_by_date(date)
            self.assertIsNotNone(index)
            self.assertEqual(self.store[index].date, date)

    def test_absent_date_returns_none(self) -> None:
        self.assertIsNone(self.store.find_by_date("2024-02-15"))
        self.assertIsNone(self.store.find_by_date("1999-01-01"))
        self.assertIsNone(self.store.find_by_date("2099-01-01"))

    def test_empty_sequence(self) -> None:
        self.assertIsNone(binary_search_by_date([], "2024-01-01"))

    def test_date_run_covers_all_records_on_the_day(self) -> None:
        records = self.store.records
        index = binary_search_by_date(records, "2024-02-14")

        run = date_run(records, index)

        self.assertEqual([records[position].time for position in run], ["09:00", "11:00", "15:00"])


if __name__ == "__main__":
    unittest.main()
