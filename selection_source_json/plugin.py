import json
from typing import Any, Dict, List, Optional

from list_items_api.models.record import EntityRecord, LinkRecord
from list_items_api.models.schema import (
    ChartApplication,
    ChartSchema,
    Image,
    ItemType,
    PropertyType,
)
from list_items_api.models.selection import ChartSelection
from list_items_api.plugins.base import ChartSnapshot, SelectionSourcePlugin
from list_items_api.types import UNFETCHED, ItemKind, LinkDirection, TypeValidator, ValueType

from list_items_core.services.exceptions import SelectionSourceError

UNFETCHED_KEY = "$unfetched"


class JsonSelectionSourcePlugin(SelectionSourcePlugin):
    """
    Reads a chart snapshot from JSON:

        {
          "name": "...",
          "schema": {"entityTypes": [...], "linkTypes": [...]},
          "entities": [{"id", "type", "label", "image", "properties"}],
          "links": [{"id", "type", "from", "to", "direction", ...}],
          "selected": {"entities": [...], "links": [...]}
        }

    ``selected`` is optional; without it every record is selected. Link
    ends may reference entities that are not selected.
    """

    def get_plugin_name(self) -> str:
        return "JSON Selection Source"

    def load(self, file_path: str) -> ChartSnapshot:
        try:
            with open(file_path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise SelectionSourceError(f"Cannot read '{file_path}': {exc}") from exc

        if not isinstance(data, dict):
            raise SelectionSourceError("Top-level JSON value must be an object.")

        schema = self._parse_schema(data.get("schema", {}))

        # Every entity on the chart; links may point at unselected ones
        entities: Dict[str, EntityRecord] = {}
        for raw in data.get("entities", []):
            record = self._parse_entity(raw, schema)
            if record.record_id in entities:
                raise SelectionSourceError(f"Duplicate entity id '{record.record_id}'.")
            entities[record.record_id] = record

        links: Dict[str, LinkRecord] = {}
        for raw in data.get("links", []):
            record = self._parse_link(raw, schema, entities)
            if record.record_id in links:
                raise SelectionSourceError(f"Duplicate link id '{record.record_id}'.")
            links[record.record_id] = record

        selected = data.get("selected")
        if selected is None:
            selection = ChartSelection(entities.values(), links.values())
        else:
            selection = ChartSelection(
                self._pick(entities, selected.get("entities", []), "entity"),
                self._pick(links, selected.get("links", []), "link"),
            )

        application = ChartApplication(schema=schema, name=data.get("name", file_path))
        return ChartSnapshot(selection=selection, application=application)

    # ── schema ───────────────────────────────────────────────────────────────

    def _parse_schema(self, raw: Dict[str, Any]) -> ChartSchema:
        try:
            return ChartSchema(
                entity_types=[self._parse_item_type(t, ItemKind.ENTITY)
                              for t in raw.get("entityTypes", [])],
                link_types=[self._parse_item_type(t, ItemKind.LINK)
                            for t in raw.get("linkTypes", [])],
            )
        except ValueError as exc:
            raise SelectionSourceError(f"Invalid schema: {exc}") from exc

    def _parse_item_type(self, raw: Dict[str, Any], kind: ItemKind) -> ItemType:
        item_type_id = self._require(raw, "id", f"{kind.value} type")
        property_types = tuple(
            PropertyType(
                id=self._require(p, "id", "property type"),
                display_name=p.get("displayName", p["id"]),
                value_type=ValueType(p.get("type", ValueType.STR.value)),
            )
            for p in raw.get("propertyTypes", [])
        )
        return ItemType(
            id=item_type_id,
            display_name=raw.get("displayName", item_type_id),
            kind=kind,
            property_types=property_types,
            image=self._parse_image(raw.get("image")),
        )

    # ── records ──────────────────────────────────────────────────────────────

    def _parse_entity(self, raw: Dict[str, Any], schema: ChartSchema) -> EntityRecord:
        record_id = str(self._require(raw, "id", "entity"))
        item_type = schema.get_entity_type(self._require(raw, "type", "entity"))
        if item_type is None:
            raise SelectionSourceError(
                f"Entity '{record_id}' has unknown type '{raw['type']}'."
            )
        return EntityRecord(
            record_id,
            item_type,
            label=raw.get("label"),
            image=self._parse_image(raw.get("image")),
            properties=self._parse_properties(record_id, item_type, raw.get("properties", {})),
        )

    def _parse_link(self, raw: Dict[str, Any], schema: ChartSchema,
                    entities: Dict[str, EntityRecord]) -> LinkRecord:
        record_id = str(self._require(raw, "id", "link"))
        item_type = schema.get_link_type(self._require(raw, "type", "link"))
        if item_type is None:
            raise SelectionSourceError(
                f"Link '{record_id}' has unknown type '{raw['type']}'."
            )

        ends = []
        for end_key in ("from", "to"):
            end_id = str(self._require(raw, end_key, "link"))
            end = entities.get(end_id)
            if end is None:
                raise SelectionSourceError(
                    f"Link '{record_id}' references unknown entity '{end_id}'."
                )
            ends.append(end)

        try:
            direction = LinkDirection(raw.get("direction", LinkDirection.NONE.value))
        except ValueError as exc:
            raise SelectionSourceError(f"Link '{record_id}': {exc}") from exc

        return LinkRecord(
            record_id,
            item_type,
            from_end=ends[0],
            to_end=ends[1],
            direction=direction,
            label=raw.get("label"),
            image=self._parse_image(raw.get("image")),
            properties=self._parse_properties(record_id, item_type, raw.get("properties", {})),
        )

    @staticmethod
    def _parse_properties(record_id: str, item_type: ItemType,
                          raw: Dict[str, Any]) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        for key, value in raw.items():
            property_type = item_type.get_property_type(key)
            if property_type is None:
                raise SelectionSourceError(
                    f"Record '{record_id}': type '{item_type.id}' has no property '{key}'."
                )
            if isinstance(value, dict) and value.get(UNFETCHED_KEY):
                properties[key] = UNFETCHED
            elif value is None:
                properties[key] = None
            else:
                try:
                    properties[key] = TypeValidator.validate_and_convert(
                        value, property_type.value_type)
                except ValueError as exc:
                    raise SelectionSourceError(f"Record '{record_id}': {exc}") from exc
        return properties

    # ── helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _parse_image(raw: Optional[Dict[str, Any]]) -> Optional[Image]:
        if not raw:
            return None
        return Image(href=raw.get("href", ""), description=raw.get("description", ""))

    @staticmethod
    def _pick(records: Dict[str, Any], ids: List[Any], what: str) -> List[Any]:
        picked = []
        for record_id in ids:
            record = records.get(str(record_id))
            if record is None:
                raise SelectionSourceError(f"Selected {what} '{record_id}' does not exist.")
            picked.append(record)
        return picked

    @staticmethod
    def _require(raw: Dict[str, Any], key: str, what: str) -> Any:
        if not isinstance(raw, dict) or key not in raw:
            raise SelectionSourceError(f"Every {what} needs a '{key}'.")
        return raw[key]
