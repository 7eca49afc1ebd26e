"""Record types held by ``RecordStore``.

Every record type is a dataclass with an integer ``id`` field and a
``create(record_id, **fields)`` classmethod the store uses to build new
records; persisted records are rebuilt with ``RecordType(**data)``. Field
declaration order is the column order of CSV exports.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from investsmart.financial.portfolio import holding_roi_percent


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _check_id(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Record id must be an integer, got {value!r}")
    return value


@dataclass
class Lead:
    """A prospect captured by the lead form.

    Attributes:
        name: Contact name.
        email: Contact email.
        phone: Contact phone number.
        note: Free-form notes.
        id: Unique identifier, assigned by the store.
        created_at: ISO-8601 UTC timestamp, assigned by the store.
    """

    name: str
    email: str
    phone: str
    note: str
    id: int
    created_at: str

    def __post_init__(self):
        self.id = _check_id(self.id)
        for field_name in ("name", "email", "phone", "note", "created_at"):
            value = getattr(self, field_name)
            if value is None:
                setattr(self, field_name, "")
            elif not isinstance(value, str):
                setattr(self, field_name, str(value))

    @classmethod
    def create(cls, record_id: int, *, name: str, email: str = "", phone: str = "", note: str = "") -> Lead:
        return cls(name=name, email=email, phone=phone, note=note, id=record_id, created_at=_now_iso())


@dataclass
class Holding:
    """A portfolio position tracked by invested and current value.

    Attributes:
        name: Asset name.
        invested: Amount put in.
        current: Current market value.
        id: Unique identifier, assigned by the store.
    """

    name: str
    invested: float
    current: float
    id: int

    def __post_init__(self):
        self.id = _check_id(self.id)
        for field_name in ("invested", "current"):
            val = getattr(self, field_name)
            if val is None or val == "":
                setattr(self, field_name, 0.0)
            elif not isinstance(val, float):
                setattr(self, field_name, float(val))
        self.name = "" if self.name is None else str(self.name)

    @classmethod
    def create(cls, record_id: int, *, name: str, invested: float = 0.0, current: float = 0.0) -> Holding:
        return cls(name=name, invested=invested, current=current, id=record_id)

    @property
    def gain_loss(self) -> float:
        """Unrealized gain/loss."""
        return self.current - self.invested

    @property
    def roi_percent(self) -> float:
        """Unrealized return in percent, divisor floored at 1."""
        return holding_roi_percent(self.invested, self.current)
