"""Apply writes the server has confirmed to a locally held list.

A client that keeps a snapshot of transactions or categories folds each
acknowledged create/update/delete into it here instead of re-fetching.
Conflicts resolve last-write-wins on ``updated_at``. Edits made by other
sessions are not reconciled: the snapshot only learns about writes that
are passed in.
"""

from __future__ import annotations

import enum
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, TypeVar


class Record(Protocol):
    id: uuid.UUID
    updated_at: datetime | None


R = TypeVar("R", bound=Record)


class WriteKind(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class ConfirmedWrite:
    kind: WriteKind
    record: Record | None = None
    record_id: uuid.UUID | None = None

    @property
    def target_id(self) -> uuid.UUID:
        if self.record is not None:
            return self.record.id
        if self.record_id is None:
            raise ValueError("ConfirmedWrite needs a record or a record_id")
        return self.record_id


def _as_utc(value: datetime) -> datetime:
    # naive timestamps (SQLite) are stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _is_newer(incoming: Record, cached: Record) -> bool:
    if incoming.updated_at is None or cached.updated_at is None:
        return True
    return _as_utc(incoming.updated_at) >= _as_utc(cached.updated_at)


def apply_confirmed_write(snapshot: Sequence[R], write: ConfirmedWrite) -> list[R]:
    """Return a new list with ``write`` applied; ``snapshot`` is left as is.

    Created records go to the front, matching the newest-first order lists
    are served in. An update for an id that is not cached is treated as a
    create; a delete for an unknown id changes nothing.
    """
    target = write.target_id
    others = [r for r in snapshot if r.id != target]

    if write.kind == WriteKind.DELETED:
        return others

    incoming = write.record
    if incoming is None:
        raise ValueError(f"{write.kind.value} write carries no record")

    for index, cached in enumerate(snapshot):
        if cached.id == target:
            if write.kind == WriteKind.UPDATED and not _is_newer(incoming, cached):
                return list(snapshot)
            updated = list(snapshot)
            updated[index] = incoming  # type: ignore[assignment]
            return updated

    return [incoming, *others]  # type: ignore[list-item]
