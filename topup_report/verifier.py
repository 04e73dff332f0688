"""
Schema verification for untyped, JSON-origin record collections.

`verify` keeps the records that satisfy a schema and drops the rest without
reporting why. Entries that are not mappings, and fields declared with an
unknown tag, fail closed.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from topup_report.domain.schema import Schema, TypeTag
from topup_report.utils.logging import get_logger

log = get_logger(__name__)


def _coerce_tag(tag: Any) -> Optional[TypeTag]:
    if isinstance(tag, TypeTag):
        return tag
    try:
        return TypeTag(tag)
    except ValueError:
        return None


def satisfies_schema(record: Any, schema: Schema) -> bool:
    """
    Return True iff every schema field is present in `record` with a value
    accepted by its tag. Fields are checked in schema order and the first
    failure short-circuits.
    """
    if not isinstance(record, Mapping):
        return False
    for field_name, tag in schema.items():
        if field_name not in record:
            return False
        type_tag = _coerce_tag(tag)
        if type_tag is None or not type_tag.accepts(record[field_name]):
            return False
    return True


def verify(records: Sequence[Any], schema: Schema) -> List[Dict[str, Any]]:
    """
    Filter `records` down to those satisfying `schema`, preserving order.

    Always returns a list; an input with no valid records yields `[]`.
    """
    valid = [record for record in records if satisfies_schema(record, schema)]
    rejected = len(records) - len(valid)
    if rejected:
        log.debug(
            "Rejected records failing schema",
            extra={"records": len(records), "valid": len(valid), "rejected": rejected},
        )
    return valid


__all__ = ["satisfies_schema", "verify"]
