"""Records of the last pets that died, newest first."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

PREF_NAMESPACE = "TamaTacCem"
MAX_RECORDS = 5

_UINT16_MASK = 0xFFFF


@dataclass
class PetRecord:
    """A deceased pet: its personality and life stage as stored codes, and its age."""

    personality: int = 0
    stage_reached: int = 0
    age_hours: int = 0
    valid: bool = False


def format_age(age_hours: int) -> str:
    """Age as whole days and remaining hours, for example ``"1d 3h"``."""
    days, hours = divmod(age_hours, 24)
    return f"{days}d {hours}h"


def _key(field: str, index: int) -> str:
    return f"{field}{index}"


class Cemetery:
    """The ``MAX_RECORDS`` most recent deaths, persisted in ``store``."""

    def __init__(self, store: MutableMapping[str, int | bool]) -> None:
        self.store = store

    def load_records(self) -> list[PetRecord]:
        """All record slots, newest first; empty slots have ``valid`` False."""
        records = []
        for index in range(MAX_RECORDS):
            if not bool(self.store.get(_key("valid", index), False)):
                records.append(PetRecord())
                continue
            records.append(
                PetRecord(
                    personality=int(self.store.get(_key("pers", index), 0)),
                    stage_reached=int(self.store.get(_key("stage", index), 0)),
                    age_hours=int(self.store.get(_key("age", index), 0)) & _UINT16_MASK,
                    valid=True,
                )
            )
        return records

    def record_death(self, personality: int, stage: int, age_hours: int) -> None:
        """Add a record at the front; the oldest one drops off the end."""
        for index in range(MAX_RECORDS - 1, 0, -1):
            source_valid = bool(self.store.get(_key("valid", index - 1), False))
            self.store[_key("valid", index)] = source_valid
            if source_valid:
                for field in ("pers", "stage", "age"):
                    self.store[_key(field, index)] = int(
                        self.store.get(_key(field, index - 1), 0)
                    )

        self.store[_key("valid", 0)] = True
        self.store[_key("pers", 0)] = int(personality)
        self.store[_key("stage", 0)] = int(stage)
        self.store[_key("age", 0)] = int(age_hours) & _UINT16_MASK