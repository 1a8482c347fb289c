"""Requirements linked to endpoints and test cases, plus storage interfaces.

Storage is injected through the two protocols below; the in-memory
implementations keep their state per instance.
"""

from datetime import datetime
from typing import Protocol

from pydantic import Field

from api_traceability.matrix.models import Matrix
from api_traceability.parser.base import WireModel


class Requirement(WireModel):
    id: str
    project_id: str
    name: str
    description: str = ""
    type: str = "functional"  # functional / non-functional
    priority: str = "medium"
    status: str = "draft"  # draft / approved / implemented / ...
    linked_endpoints: list[str] = Field(default_factory=list)
    linked_test_cases: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RequirementTraceability(WireModel):
    linked_endpoints: int
    linked_test_cases: int
    coverage_percentage: float


class TracedRequirement(Requirement):
    traceability: RequirementTraceability


def requirement_coverage(requirement: Requirement) -> float:
    """Share of links that are implemented or tested, in percent.

    Endpoints count as implemented only once the requirement itself is
    ``implemented``; every linked test case counts as tested.
    """
    total_links = len(requirement.linked_endpoints) + len(requirement.linked_test_cases)
    if total_links == 0:
        return 0
    implemented = len(requirement.linked_endpoints) if requirement.status == "implemented" else 0
    tested = len(requirement.linked_test_cases)
    return (implemented + tested) / (total_links * 2) * 100


def trace_requirement(requirement: Requirement) -> TracedRequirement:
    return TracedRequirement(
        **requirement.model_dump(),
        traceability=RequirementTraceability(
            linked_endpoints=len(requirement.linked_endpoints),
            linked_test_cases=len(requirement.linked_test_cases),
            coverage_percentage=requirement_coverage(requirement),
        ),
    )


class RequirementRepository(Protocol):
    def list_for_project(self, project_id: str) -> list[Requirement]: ...


class MatrixStore(Protocol):
    def save(self, project_id: str, matrix: Matrix) -> None: ...

    def latest(self, project_id: str) -> Matrix | None: ...


class InMemoryRequirementRepository:
    def __init__(self, requirements: list[Requirement] | None = None):
        self._requirements = list(requirements or [])

    def add(self, requirement: Requirement) -> None:
        self._requirements.append(requirement)

    def list_for_project(self, project_id: str) -> list[Requirement]:
        return [r for r in self._requirements if r.project_id == project_id]


class InMemoryMatrixStore:
    """Keeps the most recent matrix per project."""

    def __init__(self):
        self._matrices: dict[str, Matrix] = {}

    def save(self, project_id: str, matrix: Matrix) -> None:
        self._matrices[project_id] = matrix

    def latest(self, project_id: str) -> Matrix | None:
        return self._matrices.get(project_id)
