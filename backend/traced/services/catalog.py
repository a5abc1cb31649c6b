"""
Vendor catalog — immutable, locality-partitioned collection of records.

Built once at startup from static declarations and passed explicitly into
the directory pipeline. The flattened order (locality declaration order,
then declaration order within each locality) is the canonical total order
used to break score ties.
"""
from __future__ import annotations

import hashlib
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Sequence

import structlog
from pydantic import ValidationError

from ..middleware.error_handler import CatalogError
from ..models.vendor import VendorRecord

logger = structlog.get_logger("traced.services.catalog")


class Catalog:
    """Read-only mapping of locality -> vendor records.

    There are no mutation methods; replacing the catalog means building a
    new one.
    """

    __slots__ = ("_by_city", "_records", "_by_id", "_fingerprint")

    def __init__(self, by_city: Mapping[str, Sequence[VendorRecord]]):
        frozen = {city: tuple(records) for city, records in by_city.items()}
        records = tuple(r for city_records in frozen.values() for r in city_records)

        by_id: dict[str, VendorRecord] = {}
        for record in records:
            if record.id in by_id:
                raise CatalogError(
                    f"Duplicate vendor id '{record.id}'",
                    details={"id": record.id, "cities": [by_id[record.id].city, record.city]},
                )
            by_id[record.id] = record

        self._by_city = MappingProxyType(frozen)
        self._records = records
        self._by_id = MappingProxyType(by_id)

        digest = hashlib.sha256()
        for city, city_records in frozen.items():
            digest.update(city.encode())
            for record in city_records:
                digest.update(record.model_dump_json(by_alias=True).encode())
        self._fingerprint = digest.hexdigest()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Sequence[Mapping[str, Any]]]) -> Catalog:
        """Validate raw declarations into a Catalog.

        Raises:
            CatalogError: a record fails validation (missing note, bad score,
                unknown type, unparseable verified date) or an id repeats.
        """
        by_city: dict[str, list[VendorRecord]] = {}
        for city, entries in raw.items():
            validated = []
            for index, entry in enumerate(entries):
                try:
                    validated.append(VendorRecord.model_validate(entry))
                except ValidationError as exc:
                    raise CatalogError(
                        f"Invalid vendor record at {city}[{index}]",
                        details={
                            "city": city,
                            "index": index,
                            "id": entry.get("id"),
                            "errors": [
                                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                                for err in exc.errors()
                            ],
                        },
                    ) from exc
            by_city[city] = validated
        return cls(by_city)

    @property
    def by_city(self) -> Mapping[str, tuple[VendorRecord, ...]]:
        return self._by_city

    @property
    def fingerprint(self) -> str:
        """Content hash of every record, in canonical order."""
        return self._fingerprint

    def localities(self) -> list[str]:
        """Locality codes in declaration order."""
        return list(self._by_city)

    def records(self) -> tuple[VendorRecord, ...]:
        """All records in canonical total order."""
        return self._records

    def get(self, vendor_id: str) -> VendorRecord | None:
        return self._by_id.get(vendor_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VendorRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog(localities={self.localities()!r}, records={len(self)})"


def load_catalog(raw: Mapping[str, Sequence[Mapping[str, Any]]] | None = None) -> Catalog:
    """Build the catalog from the static vendor declarations."""
    if raw is None:
        from ..config.catalog_data import TRACED_VENDORS
        raw = TRACED_VENDORS

    try:
        catalog = Catalog.from_mapping(raw)
    except CatalogError as exc:
        logger.error("catalog_invalid", error=exc.message, **exc.details)
        raise

    logger.info(
        "catalog_loaded",
        localities=catalog.localities(),
        vendor_count=len(catalog),
    )
    return catalog
