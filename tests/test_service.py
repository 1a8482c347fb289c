from datetime import datetime, timezone

import pytest

from api_traceability.config import Settings
from api_traceability.errors import MalformedSpecError, MatrixNotFoundError, SpecValidationError
from api_traceability.matrix.requirements import (
    InMemoryMatrixStore,
    InMemoryRequirementRepository,
    Requirement,
    requirement_coverage,
)
from api_traceability.matrix.service import TraceabilityService

SPEC_TEXT = """
openapi: 3.0.0
info:
  title: Auth
  version: "1.0"
paths:
  /auth/login:
    post:
      tags: [Auth]
  /auth/logout:
    post:
      tags: [Auth]
"""


def _requirement(**overrides) -> Requirement:
    data = dict(
        id="req-001",
        project_id="p1",
        name="User Authentication",
        status="implemented",
        linked_endpoints=["POST__auth_login", "POST__auth_logout", "POST__auth_refresh"],
        linked_test_cases=["test-auth-0-positive", "test-auth-0-negative"],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return Requirement(**data)


class TestRequirementCoverage:
    def test_implemented(self):
        assert requirement_coverage(_requirement()) == 50

    def test_not_implemented(self):
        assert requirement_coverage(_requirement(status="draft")) == 20

    def test_no_links(self):
        assert requirement_coverage(_requirement(linked_endpoints=[], linked_test_cases=[])) == 0


class TestTraceabilityService:
    def _service(self, **settings) -> TraceabilityService:
        repo = InMemoryRequirementRepository([_requirement(), _requirement(id="req-002", project_id="p2")])
        return TraceabilityService(requirements=repo, matrices=InMemoryMatrixStore(), settings=Settings(**settings))

    def test_generate_stores_latest(self):
        service = self._service()
        matrix = service.generate_matrix("p1", SPEC_TEXT)
        assert service.matrices.latest("p1") is matrix
        assert matrix.components[0].id == "auth"
        assert matrix.test_metrics.total_test_cases == 4

    def test_include_tests_default_from_settings(self):
        service = self._service(include_tests=False)
        matrix = service.generate_matrix("p1", SPEC_TEXT)
        assert matrix.test_metrics.total_test_cases == 0

    def test_strict_rejects_invalid_spec(self):
        service = self._service()
        with pytest.raises(SpecValidationError) as exc:
            service.generate_matrix("p1", {"openapi": "2.0", "info": {"title": "x"}, "paths": {}}, strict=True)
        assert exc.value.status_code == 422
        assert len(exc.value.errors) == 2
        assert service.matrices.latest("p1") is None

    def test_lenient_accepts_invalid_spec(self):
        matrix = self._service().generate_matrix("p1", {"openapi": "2.0", "paths": {}})
        assert matrix.components == []
        assert matrix.project_name == ""

    def test_malformed_text_propagates(self):
        with pytest.raises(MalformedSpecError):
            self._service().generate_matrix("p1", "{not valid json or yaml::")

    def test_coverage_analysis_requires_matrix(self):
        with pytest.raises(MatrixNotFoundError):
            self._service().coverage_analysis("p1")

    def test_coverage_analysis_uses_settings_thresholds(self):
        service = self._service(include_tests=False, warning_threshold=0)
        service.generate_matrix("p1", SPEC_TEXT)
        report = service.coverage_analysis("p1")
        assert report.overall.total_endpoints == 2
        assert report.by_component[0].status == "warning"

    def test_requirements_traceability_for_project(self):
        traced = self._service().requirements_traceability("p1")
        assert [r.id for r in traced] == ["req-001"]
        assert traced[0].traceability.linked_endpoints == 3
        assert traced[0].traceability.linked_test_cases == 2
        assert traced[0].traceability.coverage_percentage == 50
        assert traced[0].to_wire()["traceability"]["coveragePercentage"] == 50

    def test_requirements_traceability_single(self):
        service = self._service()
        assert service.requirements_traceability("p2", "req-002").name == "User Authentication"
        assert service.requirements_traceability("p2", "req-001") is None
