from typing import Any, Dict, List, Optional

from lxml import etree

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


class XmlSelectionSourcePlugin(SelectionSourcePlugin):
    """
    SelectionSourcePlugin for XML chart snapshots.

        <chart name="...">
          <schema>
            <entityType id=".." displayName=".." imageHref=".." imageDescription="..">
              <propertyType id=".." displayName=".." type="int"/>
            </entityType>
            <linkType .../>
          </schema>
          <entities>
            <entity id=".." type=".." label=".." selected="false">
              <property type="..">value</property>
              <property type=".." unfetched="true"/>
            </entity>
          </entities>
          <links>
            <link id=".." type=".." from=".." to=".." direction="with"/>
          </links>
        </chart>

    Records are selected unless they carry ``selected="false"``.
    """

    def get_plugin_name(self) -> str:
        return "XML Selection Source"

    def load(self, file_path: str) -> ChartSnapshot:
        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
        try:
            tree = etree.parse(file_path, parser)
        except (OSError, etree.XMLSyntaxError) as exc:
            raise SelectionSourceError(f"Cannot read '{file_path}': {exc}") from exc

        root = tree.getroot()
        if etree.QName(root.tag).localname != "chart":
            raise SelectionSourceError(
                f"Root element must be <chart>, found <{etree.QName(root.tag).localname}>."
            )

        schema = self._parse_schema(root.find("schema"))

        entities: Dict[str, EntityRecord] = {}
        selected_entities: List[EntityRecord] = []
        for element in self._children(root, "entities", "entity"):
            record = self._parse_entity(element, schema)
            if record.record_id in entities:
                raise SelectionSourceError(f"Duplicate entity id '{record.record_id}'.")
            entities[record.record_id] = record
            if self._is_selected(element):
                selected_entities.append(record)

        link_ids = set()
        selected_links: List[LinkRecord] = []
        for element in self._children(root, "links", "link"):
            record = self._parse_link(element, schema, entities)
            if record.record_id in link_ids:
                raise SelectionSourceError(f"Duplicate link id '{record.record_id}'.")
            link_ids.add(record.record_id)
            if self._is_selected(element):
                selected_links.append(record)

        application = ChartApplication(schema=schema, name=root.get("name", file_path))
        return ChartSnapshot(
            selection=ChartSelection(selected_entities, selected_links),
            application=application,
        )

    # ── schema ───────────────────────────────────────────────────────────────

    def _parse_schema(self, element: Optional[etree._Element]) -> ChartSchema:
        if element is None:
            return ChartSchema()
        try:
            return ChartSchema(
                entity_types=[self._parse_item_type(e, ItemKind.ENTITY)
                              for e in element.iterfind("entityType")],
                link_types=[self._parse_item_type(e, ItemKind.LINK)
                            for e in element.iterfind("linkType")],
            )
        except ValueError as exc:
            raise SelectionSourceError(f"Invalid schema: {exc}") from exc

    def _parse_item_type(self, element: etree._Element, kind: ItemKind) -> ItemType:
        item_type_id = self._require(element, "id")
        property_types = []
        for child in element.iterfind("propertyType"):
            property_id = self._require(child, "id")
            property_types.append(PropertyType(
                id=property_id,
                display_name=child.get("displayName", property_id),
                value_type=ValueType(child.get("type", ValueType.STR.value)),
            ))
        return ItemType(
            id=item_type_id,
            display_name=element.get("displayName", item_type_id),
            kind=kind,
            property_types=tuple(property_types),
            image=self._parse_image(element),
        )

    # ── records ──────────────────────────────────────────────────────────────

    def _parse_entity(self, element: etree._Element, schema: ChartSchema) -> EntityRecord:
        record_id = self._require(element, "id")
        type_id = self._require(element, "type")
        item_type = schema.get_entity_type(type_id)
        if item_type is None:
            raise SelectionSourceError(f"Entity '{record_id}' has unknown type '{type_id}'.")
        return EntityRecord(
            record_id,
            item_type,
            label=element.get("label"),
            image=self._parse_image(element),
            properties=self._parse_properties(record_id, item_type, element),
        )

    def _parse_link(self, element: etree._Element, schema: ChartSchema,
                    entities: Dict[str, EntityRecord]) -> LinkRecord:
        record_id = self._require(element, "id")
        type_id = self._require(element, "type")
        item_type = schema.get_link_type(type_id)
        if item_type is None:
            raise SelectionSourceError(f"Link '{record_id}' has unknown type '{type_id}'.")

        ends = []
        for end_attr in ("from", "to"):
            end_id = self._require(element, end_attr)
            if end_id not in entities:
                raise SelectionSourceError(
                    f"Link '{record_id}' references unknown entity '{end_id}'."
                )
            ends.append(entities[end_id])

        try:
            direction = LinkDirection(element.get("direction", LinkDirection.NONE.value))
        except ValueError as exc:
            raise SelectionSourceError(f"Link '{record_id}': {exc}") from exc

        return LinkRecord(
            record_id,
            item_type,
            from_end=ends[0],
            to_end=ends[1],
            direction=direction,
            label=element.get("label"),
            image=self._parse_image(element),
            properties=self._parse_properties(record_id, item_type, element),
        )

    @staticmethod
    def _parse_properties(record_id: str, item_type: ItemType,
                          element: etree._Element) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        for child in element.iterfind("property"):
            key = child.get("type")
            property_type = item_type.get_property_type(key) if key else None
            if property_type is None:
                raise SelectionSourceError(
                    f"Record '{record_id}': type '{item_type.id}' has no property '{key}'."
                )
            if child.get("unfetched") == "true":
                properties[key] = UNFETCHED
                continue

            text = child.text.strip() if child.text else ''
            try:
                properties[key] = TypeValidator.validate_and_convert(text, property_type.value_type)
            except ValueError as exc:
                raise SelectionSourceError(f"Record '{record_id}': {exc}") from exc
        return properties

    # ── helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _children(root: etree._Element, container: str, tag: str) -> List[etree._Element]:
        parent = root.find(container)
        return [] if parent is None else list(parent.iterfind(tag))

    @staticmethod
    def _is_selected(element: etree._Element) -> bool:
        return element.get("selected", "true").lower() != "false"

    @staticmethod
    def _parse_image(element: etree._Element) -> Optional[Image]:
        href = element.get("imageHref")
        if href is None:
            return None
        return Image(href=href, description=element.get("imageDescription", ""))

    @staticmethod
    def _require(element: etree._Element, attribute: str) -> str:
        value = element.get(attribute)
        if value is None:
            raise SelectionSourceError(
                f"<{etree.QName(element.tag).localname}> needs a '{attribute}' attribute."
            )
        return value
