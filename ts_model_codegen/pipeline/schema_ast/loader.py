"""
Loader that builds schema AST nodes from a JSON item list.

The schema DSL itself is parsed upstream; this module only reads the
already-parsed item list, from a file path or an http(s) URL.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from ..errors import SchemaLoadError
from .nodes import (
    COMMON_TYPE_NAMES,
    CharsType,
    ColumnAttribute,
    ColumnNode,
    ColumnType,
    CommonType,
    DecimalType,
    EnumNode,
    EnumType,
    Item,
    RelationType,
    TableNode,
)

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    """Check if an input source is an http(s) URL rather than a path."""
    return urlparse(source).scheme in ("http", "https")


class SchemaLoader:
    """Reads an item list from JSON."""

    def __init__(self, timeout: float = 30.0):
        """
        Args:
            timeout: Timeout in seconds for URL sources
        """
        self.timeout = timeout

    def load(self, source: str) -> list[Item]:
        """
        Load items from a file path or an http(s) URL.

        Raises:
            SchemaLoadError: If the source cannot be read or is malformed
        """
        if is_url(source):
            document = self._fetch(source)
        else:
            document = self._read(Path(source))
        items = self.parse(document)
        logger.info(f"Loaded {len(items)} items from {source}")
        return items

    def _read(self, path: Path) -> Any:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Schema file {path} is not valid JSON: {e}") from e

    def _fetch(self, url: str) -> Any:
        logger.debug(f"Fetching schema from {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise SchemaLoadError(f"Cannot fetch schema from {url}: {e}") from e
        except ValueError as e:
            raise SchemaLoadError(f"Schema at {url} is not valid JSON: {e}") from e

    def parse(self, document: Any) -> list[Item]:
        """
        Build items from a decoded JSON document.

        Accepts a list of items, ``{"items": [...]}``, or a parser result
        ``{"list_table": [...], "list_enum": [...]}``.
        """
        if isinstance(document, list):
            raw_items = document
        elif isinstance(document, dict) and "items" in document:
            raw_items = document["items"]
        elif isinstance(document, dict) and ("list_table" in document or "list_enum" in document):
            raw_items = [*document.get("list_table", []), *document.get("list_enum", [])]
        else:
            raise SchemaLoadError("Schema document must be a list of items, {'items': [...]} or {'list_table': [...], 'list_enum': [...]}")

        if not isinstance(raw_items, list):
            raise SchemaLoadError("Schema items must be a list")

        return [self._parse_item(raw, f"items[{i}]") for i, raw in enumerate(raw_items)]

    def _parse_item(self, raw: Any, path: str) -> Item:
        if not isinstance(raw, dict):
            raise SchemaLoadError(f"{path}: item must be an object")
        name = self._require(raw, "name", str, path)
        match raw.get("type"):
            case "table":
                columns = self._require(raw, "columns", list, path)
                return TableNode(
                    name=name,
                    columns=[self._parse_column(c, f"{path}.columns[{i}]") for i, c in enumerate(columns)],
                )
            case "enum":
                members = self._require(raw, "items", list, path)
                if not all(isinstance(m, str) for m in members):
                    raise SchemaLoadError(f"{path}: enum items must be strings")
                return EnumNode(name=name, items=list(members))
            case other:
                raise SchemaLoadError(f"{path}: unknown item type {other!r}")

    def _parse_column(self, raw: Any, path: str) -> ColumnNode:
        if not isinstance(raw, dict):
            raise SchemaLoadError(f"{path}: column must be an object")
        return ColumnNode(
            name=self._require(raw, "name", str, path),
            type=self._parse_type(self._require(raw, "type", dict, path), f"{path}.type"),
            attributes=self._parse_attributes(raw.get("attributes") or [], f"{path}.attributes"),
        )

    def _parse_type(self, raw: dict[str, Any], path: str) -> ColumnType:
        match raw.get("kind"):
            case "common":
                type_name = raw.get("type")
                if type_name not in COMMON_TYPE_NAMES:
                    raise SchemaLoadError(f"{path}: unknown common type {type_name!r}")
                return CommonType(type=type_name)
            case "decimal":
                return DecimalType(precision=raw.get("precision"), scale=raw.get("scale"))
            case "chars":
                return CharsType(length=raw.get("length", raw.get("size")))
            case "enum":
                return EnumType(enum_name=self._require(raw, "enum_name", str, path))
            case "relation":
                return RelationType(
                    table_name=self._require(raw, "table_name", str, path),
                    foreign_key=self._require(raw, "foreign_key", str, path),
                )
            case other:
                raise SchemaLoadError(f"{path}: unknown type kind {other!r}")

    def _parse_attributes(self, raw: Any, path: str) -> list[ColumnAttribute]:
        # Either [{"type": "null", "value": false}, ...] or {"null": false, ...}
        if isinstance(raw, dict):
            return [ColumnAttribute(type=k, value=v) for k, v in raw.items()]
        if not isinstance(raw, list):
            raise SchemaLoadError(f"{path}: attributes must be a list or an object")
        attributes = []
        for i, attr in enumerate(raw):
            if not isinstance(attr, dict) or "type" not in attr:
                raise SchemaLoadError(f"{path}[{i}]: attribute must be an object with a 'type'")
            attributes.append(ColumnAttribute(type=attr["type"], value=attr.get("value")))
        return attributes

    def _require(self, raw: dict[str, Any], key: str, expected: type, path: str) -> Any:
        value = raw.get(key)
        if not isinstance(value, expected):
            raise SchemaLoadError(f"{path}: '{key}' must be a {expected.__name__}")
        return value
