"""Data models for parsed OpenAPI documents.

The raw document stays a plain mapping (``SpecDocument``); only the
pieces the pipeline derives from it get typed models. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SpecDocument = dict[str, Any]


class WireModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Plain JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class TestCoverage(WireModel):
    """Coverage state of a single endpoint."""

    model_config = ConfigDict(frozen=True)

    covered: bool = False
    test_cases: list[str] = Field(default_factory=list)
    coverage: float = 0


class Endpoint(WireModel):
    """One (path, HTTP verb) operation of a document."""

    model_config = ConfigDict(frozen=True)

    id: str
    path: str
    method: str  # GET / POST / ... upper-cased
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    test_coverage: TestCoverage = Field(default_factory=TestCoverage)


class SchemaDefinition(WireModel):
    """A named entry of ``components.schemas``; the definition is opaque."""

    name: str
    type: str = "schema"
    definition: Any = None


class ValidationResult(WireModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
