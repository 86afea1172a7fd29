"""
    Chart selection - the records currently selected on the chart.
"""
from typing import Dict, Iterable, List, Optional

from .record import EntityRecord, LinkRecord, Record


class ChartSelection:
    """
    Insertion-ordered collections of selected entity and link records.

    Iteration order is the order in which records were added; the
    projector relies on it for row order.
    """

    def __init__(self, entity_records: Iterable[EntityRecord] = (),
                 link_records: Iterable[LinkRecord] = ()):
        self._entities: Dict[str, EntityRecord] = {}  # record_id -> EntityRecord
        self._links: Dict[str, LinkRecord] = {}  # record_id -> LinkRecord

        for record in entity_records:
            self.add_entity(record)
        for record in link_records:
            self.add_link(record)

    def add_entity(self, record: EntityRecord) -> None:
        if record.record_id in self._entities:
            raise ValueError(f"Entity record with id {record.record_id} already selected")
        self._entities[record.record_id] = record

    def add_link(self, record: LinkRecord) -> None:
        if record.record_id in self._links:
            raise ValueError(f"Link record with id {record.record_id} already selected")
        self._links[record.record_id] = record

    @property
    def entity_records(self) -> List[EntityRecord]:
        return list(self._entities.values())

    @property
    def link_records(self) -> List[LinkRecord]:
        return list(self._links.values())

    @property
    def records(self) -> List[Record]:
        """Entities first, then links."""
        return [*self._entities.values(), *self._links.values()]

    def get_entity(self, record_id: str) -> Optional[EntityRecord]:
        return self._entities.get(record_id)

    def get_link(self, record_id: str) -> Optional[LinkRecord]:
        return self._links.get(record_id)

    def __len__(self) -> int:
        return len(self._entities) + len(self._links)

    def __repr__(self) -> str:
        return f"ChartSelection(entities={len(self._entities)}, links={len(self._links)})"
