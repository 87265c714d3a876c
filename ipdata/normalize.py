"""Bulk-to-single response normalization."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import BulkResponseMismatchError
from .models import BulkLookupResult, BulkOutcome, LookupResult

logger = logging.getLogger(__name__)


def bulk_to_lookup(bulk: BulkLookupResult) -> LookupResult:
    """Convert one bulk record into the single-lookup shape.

    The status message is dropped. The language tuple is carried over only
    when it has at least one entry; otherwise ``languages`` stays ``None``.
    """
    return LookupResult(
        ip=bulk.ip,
        asn=bulk.asn,
        organization=bulk.organization,
        city=bulk.city,
        region=bulk.region,
        postal=bulk.postal,
        country_name=bulk.country_name,
        country_code=bulk.country_code,
        flag=bulk.flag,
        emoji_flag=bulk.emoji_flag,
        emoji_unicode=bulk.emoji_unicode,
        continent_name=bulk.continent_name,
        continent_code=bulk.continent_code,
        latitude=bulk.latitude,
        longitude=bulk.longitude,
        calling_code=bulk.calling_code,
        is_eu=bulk.is_eu,
        currency=bulk.currency,
        time_zone=bulk.time_zone,
        threat=bulk.threat,
        languages=bulk.languages if bulk.languages else None,
    )


def _is_failure(record: BulkLookupResult) -> bool:
    return bool(record.message) and not record.ip


def normalize_bulk_response(
    records: Sequence[BulkLookupResult],
    requested_ips: Sequence[str] | None = None,
) -> BulkOutcome:
    """Split a bulk response into normalized results and per-IP failures.

    Records answer *requested_ips* by position. Without *requested_ips*,
    each record is keyed by its own ``ip`` field. A record whose key is
    empty or already taken is keyed ``#<index>`` instead, so no record is
    lost.
    """
    if requested_ips is None:
        keys = [r.ip for r in records]
    else:
        if len(requested_ips) != len(records):
            raise BulkResponseMismatchError(len(requested_ips), len(records))
        keys = list(requested_ips)

    results: dict[str, LookupResult] = {}
    failures: dict[str, str] = {}
    for index, (key, record) in enumerate(zip(keys, records)):
        if key in results or key in failures:
            logger.warning(
                "Duplicate key %s in bulk response; keeping record as #%d",
                key,
                index,
            )
            key = f"#{index}"
        elif not key:
            key = f"#{index}"

        if _is_failure(record):
            logger.warning("Bulk lookup failed for %s: %s", key, record.message)
            failures[key] = record.message
        else:
            results[key] = bulk_to_lookup(record)

    logger.debug(
        "Normalized bulk response: %d result(s), %d failure(s)",
        len(results),
        len(failures),
    )
    return BulkOutcome(results=results, failures=failures)
