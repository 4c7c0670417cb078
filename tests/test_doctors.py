import pytest

from shiftroster.doctors import Doctor, DoctorRegistry

ALL = [[1, 1, 1]] * 7
NONE = [[0, 0, 0]] * 7


def test_add_and_get_roundtrip():
    registry = DoctorRegistry()
    doctor = registry.add(7, "Doni", 6, ALL)
    assert registry.get(7) is doctor
    assert doctor.name == "Doni"
    assert doctor.max_shift_per_week == 6
    assert doctor.shifts_per_week == [0, 0, 0, 0, 0]


def test_registry_order_and_len():
    registry = DoctorRegistry()
    registry.add(1, "Doni", 6, ALL)
    registry.add(2, "Rena", 5, NONE)
    assert len(registry) == 2
    assert [d.name for d in registry] == ["Doni", "Rena"]
    assert registry[1].id == 2


def test_capacity_limit():
    registry = DoctorRegistry(capacity=1)
    registry.add(1, "Doni", 6, ALL)
    with pytest.raises(OverflowError):
        registry.add(2, "Rena", 5, ALL)


def test_duplicate_id_rejected():
    registry = DoctorRegistry()
    registry.add(1, "Doni", 6, ALL)
    with pytest.raises(ValueError):
        registry.add(1, "Rena", 5, ALL)


def test_missing_id_raises_key_error():
    registry = DoctorRegistry()
    with pytest.raises(KeyError):
        registry.get(3)


def test_name_too_long_rejected():
    with pytest.raises(ValueError):
        Doctor(1, "x" * 20, 3, ALL)


def test_bad_preference_shape_rejected():
    with pytest.raises(ValueError):
        Doctor(1, "Levi", 3, [[1, 1, 1]] * 6)
    with pytest.raises(ValueError):
        Doctor(1, "Levi", 3, [[1, 1]] * 7)


def test_can_work_follows_preference():
    preference = [[0, 0, 0]] * 7
    preference = [list(row) for row in preference]
    preference[3][0] = 1
    doctor = Doctor(4, "Alvi", 4, preference)
    assert doctor.can_work(3, 0) is True
    assert doctor.can_work(3, 1) is False
    assert doctor.can_work(0, 0) is False


def test_check_preference_by_id():
    registry = DoctorRegistry()
    registry.add(1, "Doni", 6, ALL)
    registry.add(2, "Rena", 5, NONE)
    assert registry.check_preference(1, 6, 2) is True
    assert registry.check_preference(2, 6, 2) is False


def test_booking_exhausts_capacity():
    doctor = Doctor(1, "Vely", 2, ALL)
    assert doctor.has_capacity(0)
    doctor.book(0)
    assert doctor.has_capacity(0)
    doctor.book(0)
    assert not doctor.has_capacity(0)
    assert doctor.has_capacity(1)
    assert doctor.shifts_per_week[0] == 2