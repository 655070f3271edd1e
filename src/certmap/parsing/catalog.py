"""
Catalog Parser.

Turns an untrusted raw import of the shape ``{"certs": [...], "links": [...]}``
into a validated Catalog. Structural checks (required keys, identifier
shape, uniqueness, referential integrity) are done by hand so the error
messages point at the offending record; field typing is delegated to the
pydantic models in ``core.types``.

All certification ids are collected before any link is checked, so a
link may reference a certification defined anywhere in ``certs``.
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Set, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from ..core.errors import SchemaError
from ..core.types import Catalog, Cert, CertLink

logger = logging.getLogger(__name__)

CERT_REQUIRED_FIELDS = ("id", "vendor", "level", "title", "roles")
LINK_REQUIRED_FIELDS = ("id", "sourceId", "targetId", "type")

DEFAULT_DATA_PACKAGE = "certmap.data"
DEFAULT_DATA_FILE = "certifications.json"

M = TypeVar("M", bound=BaseModel)


def _is_obj(value: Any) -> bool:
    return isinstance(value, dict)


def _is_seq(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _check_identifier(entry: Dict[str, Any], seen: Set[str], path: str, kind: str) -> str:
    entry_id = entry["id"]
    if not isinstance(entry_id, str) or not entry_id.strip():
        raise SchemaError("id must be a non-empty string", path=f"{path}.id")
    if entry_id in seen:
        raise SchemaError(f"duplicate {kind} id: {entry_id}", path=f"{path}.id")
    seen.add(entry_id)
    return entry_id


def _build(model: Type[M], entry: Dict[str, Any], path: str) -> M:
    """Build a typed record, translating pydantic errors into SchemaError."""
    try:
        return model.model_validate(entry)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        raise SchemaError(first["msg"], path=f"{path}.{loc}" if loc else path) from e


def _parse_certs(raw_certs: List[Any]) -> List[Cert]:
    seen: Set[str] = set()
    certs: List[Cert] = []
    for i, entry in enumerate(raw_certs):
        path = f"certs[{i}]"
        if not _is_obj(entry):
            raise SchemaError("entry is not an object", path=path)
        for key in CERT_REQUIRED_FIELDS:
            if key not in entry:
                raise SchemaError(f'missing field "{key}"', path=path)
        _check_identifier(entry, seen, path, "cert")
        if not _is_seq(entry["roles"]):
            raise SchemaError("roles must be an array", path=f"{path}.roles")
        certs.append(_build(Cert, entry, path))
    return certs


def _parse_links(raw_links: List[Any], cert_ids: Set[str]) -> List[CertLink]:
    seen: Set[str] = set()
    links: List[CertLink] = []
    for i, entry in enumerate(raw_links):
        path = f"links[{i}]"
        if not _is_obj(entry):
            raise SchemaError("entry is not an object", path=path)
        for key in LINK_REQUIRED_FIELDS:
            if key not in entry:
                raise SchemaError(f'missing field "{key}"', path=path)
        _check_identifier(entry, seen, path, "link")
        for key in ("sourceId", "targetId"):
            ref = entry[key]
            if not isinstance(ref, str) or ref not in cert_ids:
                raise SchemaError(f"{key} does not reference a cert: {ref}", path=f"{path}.{key}")
        links.append(_build(CertLink, entry, path))
    return links


def parse_imported_data(raw: Any) -> Catalog:
    """
    Validate a raw import and return the typed catalog.

    Args:
        raw: Any value, normally the decoded content of a data file.

    Returns:
        Catalog whose certs and links preserve the input order.

    Raises:
        SchemaError: On the first structural violation found.
    """
    if not _is_obj(raw):
        raise SchemaError('root must be an object { "certs": [], "links": [] }')
    if not _is_seq(raw.get("certs")):
        raise SchemaError('"certs" must be an array')
    if not _is_seq(raw.get("links")):
        raise SchemaError('"links" must be an array')

    certs = _parse_certs(raw["certs"])
    links = _parse_links(raw["links"], {cert.id for cert in certs})

    logger.debug(f"Validated catalog: {len(certs)} certs, {len(links)} links")
    return Catalog(certs=certs, links=links)


def _decode(text: str, suffix: str) -> Any:
    try:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SchemaError(f"cannot decode catalog: {e}") from e


def load_catalog(path: Path | str) -> Catalog:
    """
    Load and validate a catalog file.

    JSON by default; ``.yaml``/``.yml`` files are read with PyYAML.
    """
    file_path = Path(path)
    logger.debug(f"Loading catalog from {file_path}")
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaError(f"cannot read catalog: {e}", path=str(file_path)) from e
    return parse_imported_data(_decode(text, file_path.suffix))


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """Load the catalog bundled with the package. Validated once per process."""
    text = resources.files(DEFAULT_DATA_PACKAGE).joinpath(DEFAULT_DATA_FILE).read_text(encoding="utf-8")
    return parse_imported_data(_decode(text, ".json"))
