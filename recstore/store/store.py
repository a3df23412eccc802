from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from recstore.common.logging import get_logger
from recstore.config import get_store_config

from .ids import IdStrategy, MonotonicIds, make_id_strategy
from .models import ListFilter, Record, RecordCounts

logger = get_logger("recstore.store")


class InvalidLabelError(ValueError):
    """Raised when a record label is empty or blank."""


class RecordStore:
    """Named in-memory collection of records keyed by id.

    Not safe for unsynchronized concurrent mutation; callers sharing a store
    across threads must guard the whole store with their own lock.
    """

    def __init__(
        self,
        name: str,
        records: Iterable[Record] = (),
        id_strategy: Optional[IdStrategy] = None,
    ):
        self.name = name
        self._by_id: Dict[int, Record] = {}
        self._next_id = id_strategy or MonotonicIds()
        for r in records:
            self._by_id[r.id] = r

    @classmethod
    def from_config(cls, name: Optional[str] = None, records: Iterable[Record] = (), config=None) -> "RecordStore":
        config = config or get_store_config()
        errors = config.validate()
        if errors:
            raise ValueError("; ".join(errors))
        return cls(name or config.default_name, records, make_id_strategy(config))

    def add(self, label: str, id: Optional[int] = None) -> int:
        if not isinstance(label, str) or not label.strip():
            raise InvalidLabelError(f"invalid label: {label!r}")
        if id is None:
            id = self._next_id(self._by_id.keys())
        record = Record(id=id, label=label)
        replaced = record.id in self._by_id
        self._by_id[record.id] = record
        logger.debug("record_added", extra={"store": self.name, "id": record.id, "replaced": replaced})
        return record.id

    def get_by_id(self, id: int) -> Optional[Record]:
        return self._by_id.get(id)

    def complete(self, id: int) -> None:
        r = self._by_id.get(id)
        if r is None:
            return
        self._by_id[id] = r.model_copy(update={"done": True})
        logger.debug("record_completed", extra={"store": self.name, "id": id})

    def list(self, filter: ListFilter | str = ListFilter.INCOMPLETE) -> List[Record]:
        if ListFilter(filter) is ListFilter.ALL:
            return list(self._by_id.values())
        return [r for r in self._by_id.values() if not r.done]

    def remove_completed(self) -> None:
        done_ids = [rid for rid, r in self._by_id.items() if r.done]
        for rid in done_ids:
            del self._by_id[rid]
        if done_ids:
            logger.debug("records_purged", extra={"store": self.name, "count": len(done_ids)})

    def remove_by_id(self, id: int) -> None:
        if self._by_id.pop(id, None) is not None:
            logger.debug("record_removed", extra={"store": self.name, "id": id})

    def count(self) -> RecordCounts:
        incomplete = sum(1 for r in self._by_id.values() if not r.done)
        return RecordCounts(total=len(self._by_id), incomplete=incomplete)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, id: object) -> bool:
        return id in self._by_id

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._by_id.values()))

    def __repr__(self) -> str:
        c = self.count()
        return f"RecordStore(name={self.name!r}, total={c.total}, incomplete={c.incomplete})"
