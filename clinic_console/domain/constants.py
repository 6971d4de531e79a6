from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]

    @classmethod
    def parse(cls, raw: str) -> Gender:
        """Lenient parse: anything that is not male/female is Other."""
        value = raw.strip().lower()
        if value in {"m", "male"}:
            return cls.MALE
        if value in {"f", "female"}:
            return cls.FEMALE
        return cls.OTHER


class StaffRole(StrEnum):
    DOCTOR = "Doctor"
    NURSE = "Nurse"
    ADMIN = "Admin"
    TECHNICIAN = "Technician"

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]

    @classmethod
    def parse(cls, raw: str) -> StaffRole | None:
        value = raw.strip().lower()
        for item in cls:
            if value in {item.value.lower(), item.value[0].lower()}:
                return item
        return None


class ShiftKind(StrEnum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    NIGHT = "Night"

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]

    @property
    def time_range(self) -> str:
        return _SHIFT_TIME_RANGES[self]

    @property
    def label(self) -> str:
        return f"{self.value} ({self.time_range})"


_SHIFT_TIME_RANGES = {
    ShiftKind.MORNING: "6am - 2pm",
    ShiftKind.AFTERNOON: "2pm - 10pm",
    ShiftKind.NIGHT: "10pm - 6am",
}

SHIFT_ORDER: tuple[ShiftKind, ...] = (ShiftKind.MORNING, ShiftKind.AFTERNOON, ShiftKind.NIGHT)
