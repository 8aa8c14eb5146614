"""
Scheme catalog loading and the process-wide catalog store
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from pydantic import ValidationError

from ..models.scheme import SchemeRecord

logger = logging.getLogger(__name__)


class SchemeCatalog:
    """Immutable, ordered snapshot of scheme records"""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[SchemeRecord] = ()):
        self._records: Tuple[SchemeRecord, ...] = tuple(records)

    @classmethod
    def from_documents(cls, documents: Iterable[Any]) -> "SchemeCatalog":
        """Build a catalog from raw JSON objects, skipping unusable entries"""
        records = []
        for index, doc in enumerate(documents):
            if not isinstance(doc, dict):
                logger.warning(f"Skipping catalog entry {index}: expected an object, got {type(doc).__name__}")
                continue
            try:
                records.append(SchemeRecord.model_validate(doc))
            except ValidationError as e:
                logger.warning(f"Skipping catalog entry {index}: {e}")
        return cls(records)

    @property
    def records(self) -> Tuple[SchemeRecord, ...]:
        return self._records

    def to_documents(self) -> List[Dict[str, Any]]:
        return [record.to_document() for record in self._records]

    def __iter__(self) -> Iterator[SchemeRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"SchemeCatalog({len(self._records)} schemes)"


def load_catalog(path: Union[str, Path]) -> SchemeCatalog:
    """
    Load the scheme catalog from a JSON file holding an array of schemes.

    Read or parse failures are logged and give an empty catalog so that the
    service can still start.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            documents = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading yojana data from {path}: {e}")
        return SchemeCatalog()

    if not isinstance(documents, list):
        logger.error(f"Yojana data in {path} must be a JSON array, got {type(documents).__name__}")
        return SchemeCatalog()

    catalog = SchemeCatalog.from_documents(documents)
    logger.info(f"Loaded {len(catalog)} schemes from {path}")
    return catalog


class CatalogStore:
    """
    Holds the current catalog snapshot.

    Readers call current() once per request and keep that reference;
    publish() and reload() swap in a whole new snapshot.
    """

    def __init__(self, catalog: SchemeCatalog = None):
        self._catalog = catalog if catalog is not None else SchemeCatalog()

    def current(self) -> SchemeCatalog:
        return self._catalog

    def publish(self, catalog: SchemeCatalog) -> SchemeCatalog:
        previous = self._catalog
        self._catalog = catalog
        return previous

    def reload(self, path: Union[str, Path]) -> SchemeCatalog:
        catalog = load_catalog(path)
        self.publish(catalog)
        return catalog


# Global catalog store instance
catalog_store = CatalogStore()
