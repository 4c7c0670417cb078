"""Monthly shift schedule: random filling, preference-driven swaps and conflict reports."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .doctors import DAYS_PER_WEEK, SHIFTS_PER_DAY, WEEKS_TRACKED, DoctorRegistry

DEFAULT_DAYS = 30


def random_index(count: int, rng: random.Random | None = None) -> int:
    """A random index in range(count)."""
    if count <= 0:
        raise ValueError("count must be positive")
    return (rng or random).randrange(count)


@dataclass(frozen=True)
class Conflict:
    """A slot whose doctor had to be assigned against their preference."""

    doctor_id: int
    name: str
    day: int
    shift: int


class Schedule:
    """A days-by-shifts table of doctor ids; None marks an unfilled slot."""

    def __init__(
        self,
        registry: DoctorRegistry,
        days: int = DEFAULT_DAYS,
        shifts: int = SHIFTS_PER_DAY,
    ) -> None:
        if not 1 <= days <= DAYS_PER_WEEK * WEEKS_TRACKED:
            raise ValueError(f"days must be between 1 and {DAYS_PER_WEEK * WEEKS_TRACKED}")
        if not 1 <= shifts <= SHIFTS_PER_DAY:
            raise ValueError(f"shifts must be between 1 and {SHIFTS_PER_DAY}")
        self.registry = registry
        self.days = days
        self.shifts = shifts
        self.slots: list[list[int | None]] = [[None] * shifts for _ in range(days)]

    def _fits(self, doctor_id: int | None, day: int, shift: int) -> bool:
        if doctor_id is None:
            return False
        return self.registry.check_preference(doctor_id, day % DAYS_PER_WEEK, shift)

    def fill(self, rng: random.Random | None = None) -> None:
        """Assign a doctor to every slot, starting from a random doctor each time.

        Doctors are tried in turn from the random start; for the first round
        only those who prefer the slot are taken, for the second round anyone
        with weekly capacity left.
        """
        count = len(self.registry)
        if count == 0:
            raise ValueError("no doctors to schedule")
        for day in range(self.days):
            week = day // DAYS_PER_WEEK
            for shift in range(self.shifts):
                honour_preference = True
                index = random_index(count, rng)
                for checked in range(1, 2 * count + 1):
                    doctor = self.registry[index]
                    if doctor.has_capacity(week) and (
                        not honour_preference
                        or doctor.can_work(day % DAYS_PER_WEEK, shift)
                    ):
                        self.slots[day][shift] = doctor.id
                        doctor.book(week)
                        break
                    if checked > count - 1:
                        honour_preference = False
                    index = (index + 1) % count

    def swap_conflicts(self) -> None:
        """Swap each unwanted assignment with a slot of the same week where both fit."""
        for day in range(self.days):
            for shift in range(self.shifts):
                original = self.slots[day][shift]
                if original is None or self._fits(original, day, shift):
                    continue
                week_start = day - day % DAYS_PER_WEEK
                week_end = min(week_start + DAYS_PER_WEEK, self.days)
                candidates = (
                    (other_day, other_shift)
                    for other_day in range(week_start, week_end)
                    for other_shift in range(self.shifts)
                )
                for other_day, other_shift in candidates:
                    candidate = self.slots[other_day][other_shift]
                    if self._fits(original, other_day, other_shift) and self._fits(
                        candidate, day, shift
                    ):
                        self.slots[day][shift] = candidate
                        self.slots[other_day][other_shift] = original
                        break

    def conflicts(self) -> list[Conflict]:
        """Filled slots that go against the doctor's preference, latest slot first."""
        found = [
            Conflict(doctor_id, self.registry.get(doctor_id).name, day + 1, shift + 1)
            for day, row in enumerate(self.slots)
            for shift, doctor_id in enumerate(row)
            if doctor_id is not None and not self._fits(doctor_id, day, shift)
        ]
        found.reverse()
        return found

    def rows(self) -> Iterator[tuple[int | None, ...]]:
        """The doctor ids of each day, one tuple per day."""
        for row in self.slots:
            yield tuple(row)

    def format(self) -> str:
        """The schedule as text: one line per day with id and name per shift."""
        lines = []
        for number, row in enumerate(self.rows(), start=1):
            cells = "".join(
                f"[{doctor_id or 0}]"
                f"{self.registry.get(doctor_id).name if doctor_id is not None else ''}     "
                for doctor_id in row
            )
            lines.append(f"{number}    {cells}\n")
        return "".join(lines)


def generate_schedule(
    registry: DoctorRegistry,
    rng: random.Random | None = None,
    days: int = DEFAULT_DAYS,
    shifts: int = SHIFTS_PER_DAY,
) -> Schedule:
    """Build a filled schedule with preference conflicts swapped away where possible."""
    schedule = Schedule(registry, days, shifts)
    schedule.fill(rng)
    schedule.swap_conflicts()
    return schedule


def format_conflicts(conflicts: Iterable[Conflict]) -> str:
    """Text report of the given conflicts."""
    return "".join(
        f"id : {c.doctor_id}\nHari : {c.day} Shift : {c.shift}\n\n" for c in conflicts
    )