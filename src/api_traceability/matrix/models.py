"""Models for traceability matrices and the reports built from them."""

from datetime import datetime

from pydantic import ConfigDict, Field

from api_traceability.parser.base import Endpoint, WireModel


class TestStep(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str = "step-1"
    action: str
    data: str
    expected_response: str


class TestScenario(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    steps: list[TestStep]
    expected_result: str
    status: str = "pending"


class TestCase(WireModel):
    """A synthesized test descriptor linked to one endpoint."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    type: str = "api"
    status: str = "pending"
    scenarios: list[TestScenario]
    linked_endpoints: list[str]


class Component(WireModel):
    """Endpoints sharing a tag or leading path segment."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    apis: list[Endpoint] = Field(default_factory=list)
    test_cases: list[TestCase] = Field(default_factory=list)


class TestMetrics(WireModel):
    total_endpoints: int
    tested_endpoints: int
    coverage_percentage: float
    total_test_cases: int
    passed_tests: int = 0
    failed_tests: int = 0
    pending_tests: int
    last_updated: datetime


class Matrix(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str
    project_name: str
    version: str
    created_at: datetime
    components: list[Component]
    test_metrics: TestMetrics


class EndpointRef(WireModel):
    path: str
    method: str


class CoverageSummary(WireModel):
    total_endpoints: int
    covered_endpoints: int
    coverage_percentage: float


class ComponentCoverage(CoverageSummary):
    component_id: str
    name: str
    status: str  # healthy / warning / error
    uncovered_endpoints: list[EndpointRef] = Field(default_factory=list)


class CoverageGap(WireModel):
    type: str  # untested_endpoint / missing_negative_tests
    endpoint: str
    method: str
    component: str
    severity: str


class CoverageAnalysis(WireModel):
    overall: CoverageSummary
    by_component: list[ComponentCoverage]
    gaps: list[CoverageGap]
