"""Employee model shared by the HTTP API, Cosmos DB and the cache."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Python attribute name → stored document property name
_DOCUMENT_FIELDS: list[tuple[str, str]] = [
    ("id", "id"),
    ("department_id", "DepartmentId"),
    ("name", "Name"),
    ("age", "Age"),
    ("position", "Position"),
    ("department_name", "DepartmentName"),
    ("tenure", "Tenure"),
]

# Stored documents may carry null or omit these; they read back as 0
_INT_FIELDS = ("age", "tenure")


class Employee(BaseModel):
    """An employee record, keyed and partitioned by ``id``.

    ``departmentId`` must be present in request bodies but may be null,
    matching documents already in the store.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    department_id: str | None
    name: str | None = None
    age: int = 0
    position: str | None = None
    department_name: str | None = None
    tenure: int = 0

    def to_document(self) -> dict[str, Any]:
        return {doc_key: getattr(self, attr) for attr, doc_key in _DOCUMENT_FIELDS}

    @classmethod
    def from_document(cls, raw: dict[str, Any]) -> Employee:
        data = {attr: raw.get(doc_key) for attr, doc_key in _DOCUMENT_FIELDS}
        for attr in _INT_FIELDS:
            if data[attr] is None:
                data[attr] = 0
        return cls.model_validate(data)
