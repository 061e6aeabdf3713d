"""Catalog and site-mapping loading.

The component catalog is a JSON object keyed by section, each section
holding a ``components`` array. The optional site mapping is a JSON object
keyed by site name, mapping section keys to lists of component ids.

Usage:
    from lifecycle_timeline.catalog import load_catalog, load_site_mapping

    catalog = load_catalog("data/data.json")
    site_mapping = load_site_mapping("https://example.org/data/site-mapping.json")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
import requests

from lifecycle_timeline.exceptions import CatalogLoadError
from lifecycle_timeline.http_client import get_default_headers
from lifecycle_timeline.logging_config import logger

from .models import Catalog, ComponentRecord, SiteMapping

REQUEST_TIMEOUT = 30

CATALOG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "properties": {
            "components": {
                "type": "array",
                "items": {"type": "object"},
            },
        },
    },
}

SITE_MAPPING_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "additionalProperties": {
            "type": "array",
            "items": {"type": ["string", "integer"]},
        },
    },
}


class _NotFound(Exception):
    """Source does not exist (missing file or HTTP 404)."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_json(url: str) -> Any:
    try:
        response = requests.get(url, headers=get_default_headers(), timeout=REQUEST_TIMEOUT)
    except requests.exceptions.ConnectionError:
        raise CatalogLoadError(f"Failed to connect to {url}")
    except requests.exceptions.Timeout:
        raise CatalogLoadError(f"Request to {url} timed out")

    if response.status_code == 404:
        raise _NotFound(url)
    if not response.ok:
        raise CatalogLoadError(f"Failed to fetch {url}. [{response.status_code}]")

    try:
        return response.json()
    except ValueError as e:
        raise CatalogLoadError(f"Invalid JSON from {url}: {e}")


def _read_json(path: str) -> Any:
    file_path = Path(path)
    if not file_path.is_file():
        raise _NotFound(path)
    try:
        with file_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise CatalogLoadError(f"Failed to read {path}: {e}")


def load_json_document(source: str) -> Any:
    """
    Load a JSON document from a local path or an http(s) URL.

    Raises:
        CatalogLoadError: If the document is missing or cannot be parsed
    """
    try:
        return _fetch_json(source) if _is_url(source) else _read_json(source)
    except _NotFound:
        raise CatalogLoadError(f"{source} not found")


def _validate(data: Any, schema: Dict[str, Any], what: str) -> None:
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise CatalogLoadError(f"Invalid {what} at {location}: {e.message}")


def parse_catalog(data: Any) -> Catalog:
    """
    Decode a catalog document into section -> ComponentRecord lists.

    Sections without a ``components`` array are kept as empty sections.

    Raises:
        CatalogLoadError: If the document does not have the catalog shape
    """
    _validate(data, CATALOG_SCHEMA, "catalog")

    catalog: Catalog = {}
    for section, body in data.items():
        components = body.get("components") or []
        catalog[section] = [ComponentRecord.from_dict(item, section=section) for item in components]
    return catalog


def parse_site_mapping(data: Any) -> SiteMapping:
    """
    Decode a site mapping document, normalizing ids to strings.

    Raises:
        CatalogLoadError: If the document does not have the site-mapping shape
    """
    _validate(data, SITE_MAPPING_SCHEMA, "site mapping")
    return {
        site: {section: [str(i) for i in ids] for section, ids in sections.items()}
        for site, sections in data.items()
    }


def load_catalog(source: str) -> Catalog:
    """
    Load the component catalog.

    Args:
        source: Path or http(s) URL of the catalog JSON

    Returns:
        Parsed catalog

    Raises:
        CatalogLoadError: If the catalog is missing, unreadable, or malformed
    """
    catalog = parse_catalog(load_json_document(source))
    total = sum(len(items) for items in catalog.values())
    logger.info(f"Loaded {total} components in {len(catalog)} sections from {source}")
    return catalog


def load_site_mapping(source: Optional[str]) -> SiteMapping:
    """
    Load the optional site mapping.

    A missing source yields an empty mapping; a present but malformed one is an error.

    Raises:
        CatalogLoadError: If the mapping exists but cannot be parsed
    """
    if not source:
        return {}

    try:
        data = _fetch_json(source) if _is_url(source) else _read_json(source)
    except _NotFound:
        logger.warning(f"Site mapping {source} not found, continuing without sites")
        return {}

    mapping = parse_site_mapping(data)
    logger.info(f"Loaded site mapping with {len(mapping)} sites from {source}")
    return mapping
