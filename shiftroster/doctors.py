"""Doctors, their weekly shift limits and their shift preferences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

DAYS_PER_WEEK = 7
SHIFTS_PER_DAY = 3
WEEKS_TRACKED = 5
MAX_NAME_LENGTH = 19
DEFAULT_CAPACITY = 10


def _normalise_preference(preference: Iterable[Iterable[int]]) -> tuple[tuple[bool, ...], ...]:
    rows = tuple(tuple(value == 1 for value in row) for row in preference)
    if len(rows) != DAYS_PER_WEEK or any(len(row) != SHIFTS_PER_DAY for row in rows):
        raise ValueError(
            f"preference must be {DAYS_PER_WEEK} rows of {SHIFTS_PER_DAY} values"
        )
    return rows


@dataclass
class Doctor:
    """A doctor with a weekly shift limit and a day-by-shift availability table."""

    id: int
    name: str
    max_shift_per_week: int
    preference: tuple[tuple[bool, ...], ...]
    shifts_per_week: list[int] = field(default_factory=lambda: [0] * WEEKS_TRACKED)

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"name longer than {MAX_NAME_LENGTH} characters: {self.name!r}")
        self.preference = _normalise_preference(self.preference)

    def can_work(self, day: int, shift: int) -> bool:
        """True if the doctor is available on this weekday (0-6) and shift (0-2)."""
        return self.preference[day][shift]

    def has_capacity(self, week: int) -> bool:
        """True if the doctor may still take a shift in the given week."""
        return self.max_shift_per_week > self.shifts_per_week[week]

    def book(self, week: int) -> None:
        """Count one more shift taken in the given week."""
        self.shifts_per_week[week] += 1


class DoctorRegistry:
    """An ordered, bounded collection of doctors addressed by their ids."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._doctors: list[Doctor] = []
        self._by_id: dict[int, Doctor] = {}

    def add(
        self,
        doctor_id: int,
        name: str,
        max_shift: int,
        preference: Sequence[Sequence[int]],
    ) -> Doctor:
        """Register a new doctor with no shifts booked yet."""
        if len(self._doctors) >= self.capacity:
            raise OverflowError(f"registry is full ({self.capacity} doctors)")
        if doctor_id in self._by_id:
            raise ValueError(f"duplicate doctor id {doctor_id}")
        doctor = Doctor(doctor_id, name, max_shift, preference)
        self._doctors.append(doctor)
        self._by_id[doctor_id] = doctor
        return doctor

    def get(self, doctor_id: int) -> Doctor:
        """Return the doctor with this id; KeyError if there is none."""
        try:
            return self._by_id[doctor_id]
        except KeyError:
            raise KeyError(f"no doctor with id {doctor_id}") from None

    def __len__(self) -> int:
        return len(self._doctors)

    def __iter__(self) -> Iterator[Doctor]:
        return iter(self._doctors)

    def __getitem__(self, index: int) -> Doctor:
        return self._doctors[index]

    def check_preference(self, doctor_id: int, day: int, shift: int) -> bool:
        """True if the doctor with this id can work the given weekday and shift."""
        return self.get(doctor_id).can_work(day, shift)