"""
Field schemas for the people and organizations collections.

A schema is an ordered mapping of field name to `TypeTag`. Each tag owns a pure
predicate deciding whether an untyped, JSON-origin value has the right shape.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Mapping

EMAIL_PATTERN = re.compile(
    r"\A[\w+\-.]+@[a-z\d-]+(?:\.[a-z\d-]+)*\.[a-z]+\Z",
    re.IGNORECASE | re.ASCII,
)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    # bool is a subclass of int and must not count as one here
    return isinstance(value, int) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return value is True or value is False


def _is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


class TypeTag(str, Enum):
    """Primitive validation kinds a schema field can declare."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    EMAIL = "email"

    def accepts(self, value: Any) -> bool:
        return _PREDICATES[self](value)


_PREDICATES: Dict[TypeTag, Callable[[Any], bool]] = {
    TypeTag.STRING: _is_string,
    TypeTag.INTEGER: _is_integer,
    TypeTag.BOOLEAN: _is_boolean,
    TypeTag.EMAIL: _is_email,
}

Schema = Mapping[str, TypeTag]

PERSON_SCHEMA: Schema = {
    "id": TypeTag.INTEGER,
    "first_name": TypeTag.STRING,
    "last_name": TypeTag.STRING,
    "email": TypeTag.EMAIL,
    "company_id": TypeTag.INTEGER,
    "email_status": TypeTag.BOOLEAN,
    "active_status": TypeTag.BOOLEAN,
    "tokens": TypeTag.INTEGER,
}

ORGANIZATION_SCHEMA: Schema = {
    "id": TypeTag.INTEGER,
    "name": TypeTag.STRING,
    "top_up": TypeTag.INTEGER,
    "email_status": TypeTag.BOOLEAN,
}


__all__ = [
    "EMAIL_PATTERN",
    "ORGANIZATION_SCHEMA",
    "PERSON_SCHEMA",
    "Schema",
    "TypeTag",
]
