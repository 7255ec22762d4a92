import unittest

from records import (
    FIRST_APPOINTMENT_ID,
    INITIAL_CAPACITY,
    AppointmentNotFoundError,
    AppointmentRecord,
    AppointmentStore,
)


def make_record(date: str = "2024-03-01", time: str = "09:00", status: str = "Active") -> AppointmentRecord:
    return AppointmentRecord(
        appointment_id=0,
        patient_name="Ivan Petrov",
        doctor_name="Dr. Georgieva",
        date=date,
        time=time,
        status=status,
    )


class AppointmentStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = AppointmentStore()

    def test_first_id_is_1001(self) -> None:
        self.assertEqual(self.store.generate_id(), FIRST_APPOINTMENT_ID)
        self.assertEqual(self.store.add(make_record()), 1001)

    def test_ids_are_strictly_increasing(self) -> None:
        ids = [self.store.add(make_record()) for _ in range(25)]

        self.assertEqual(ids, list(range(1001, 1026)))
        self.assertEqual(len(set(ids)), len(ids))

    def test_generate_id_follows_maximum_existing_id(self) -> None:
        self.store.append_loaded(
            AppointmentRecord(2000, "A", "B", "2024-01-01", "10:00", "Done")
        )
        self.store.append_loaded(
            AppointmentRecord(1500, "C", "D", "2024-01-02", "11:00", "Active")
        )

        self.assertEqual(self.store.add(make_record()), 2001)

    def test_capacity_doubles_when_full(self) -> None:
        self.assertEqual(self.store.capacity, INITIAL_CAPACITY)
        for _ in range(INITIAL_CAPACITY):
            self.store.add(make_record())
        self.assertEqual(self.store.capacity, INITIAL_CAPACITY)

        self.store.add(make_record())

        self.assertEqual(self.store.capacity, INITIAL_CAPACITY * 2)
        self.assertLessEqual(len(self.store), self.store.capacity)

    def test_growth_preserves_order(self) -> None:
        ids = [self.store.add(make_record()) for _ in range(INITIAL_CAPACITY * 3)]

        self.assertEqual([record.appointment_id for record in self.store], ids)
        self.assertEqual(self.store.capacity, INITIAL_CAPACITY * 4)

    def test_rejects_non_positive_capacity(self) -> None:
        with self.assertRaises(ValueError):
            AppointmentStore(capacity=0)

    def test_find_by_id(self) -> None:
        self.store.add(make_record())
        second = self.store.add(make_record())

        self.assertEqual(self.store.find_by_id(second), 1)
        self.assertIsNone(self.store.find_by_id(4242))

    def test_update_status_in_place(self) -> None:
        appointment_id = self.store.add(make_record())

        record = self.store.update_status(appointment_id, "Cancelled")

        self.assertEqual(record.status, "Cancelled")
        self.assertEqual(self.store[0].status, "Cancelled")

    def test_update_status_accepts_free_text(self) -> None:
        appointment_id = self.store.add(make_record())

        self.store.update_status(appointment_id, "Rescheduled")

        self.assertEqual(self.store.get(appointment_id).status, "Rescheduled")

    def test_update_status_missing_id_leaves_store_unchanged(self) -> None:
        self.store.add(make_record())
        self.store.add(make_record(date="2024-01-10", time="14:30"))
        before = [record.to_dict() for record in self.store]

        with self.assertRaises(AppointmentNotFoundError) as context:
            self.store.update_status(9999, "Cancelled")

        self.assertEqual(context.exception.appointment_id, 9999)
        self.assertIsInstance(context.exception, LookupError)
        self.assertEqual([record.to_dict() for record in self.store], before)

    def test_records_returns_a_copy(self) -> None:
        self.store.add(make_record())

        snapshot = self.store.records
        snapshot.clear()

        self.assertEqual(len(self.store), 1)

    def test_composite_key(self) -> None:
        self.assertEqual(make_record("2024-01-05", "09:30").composite_key, "2024-01-05 09:30")


if __name__ == "__main__":
    unittest.main()
