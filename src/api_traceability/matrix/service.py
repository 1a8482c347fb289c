"""Facade tying matrix generation to injected storage."""

import logging

from api_traceability.config import Settings, get_settings
from api_traceability.errors import MatrixNotFoundError
from api_traceability.matrix.builder import generate_matrix
from api_traceability.matrix.coverage import analyze_coverage
from api_traceability.matrix.models import CoverageAnalysis, Matrix
from api_traceability.matrix.requirements import (
    InMemoryMatrixStore,
    InMemoryRequirementRepository,
    MatrixStore,
    RequirementRepository,
    TracedRequirement,
    trace_requirement,
)
from api_traceability.parser.base import SpecDocument
from api_traceability.parser.loader import load_spec
from api_traceability.parser.swagger import ensure_valid

logger = logging.getLogger(__name__)


class TraceabilityService:
    """Generates, stores and reports on traceability matrices per project."""

    def __init__(
        self,
        requirements: RequirementRepository | None = None,
        matrices: MatrixStore | None = None,
        settings: Settings | None = None,
    ):
        self.requirements = requirements if requirements is not None else InMemoryRequirementRepository()
        self.matrices = matrices if matrices is not None else InMemoryMatrixStore()
        self.settings = settings or get_settings()

    def generate_matrix(
        self,
        project_id: str,
        spec: dict | str | bytes,
        include_tests: bool | None = None,
        strict: bool = False,
    ) -> Matrix:
        """Load ``spec``, build its matrix and store it as the project's latest.

        With ``strict`` a document failing validation raises
        SpecValidationError instead of producing a matrix.
        """
        doc: SpecDocument = load_spec(spec)
        if strict:
            ensure_valid(doc)

        if include_tests is None:
            include_tests = self.settings.include_tests
        matrix = generate_matrix(project_id, doc, include_tests=include_tests)
        self.matrices.save(project_id, matrix)
        logger.info(
            "Generated matrix %s (%.1f%% coverage)", matrix.id, matrix.test_metrics.coverage_percentage
        )
        return matrix

    def requirements_traceability(
        self, project_id: str, requirement_id: str | None = None
    ) -> list[TracedRequirement] | TracedRequirement | None:
        """All traced requirements of a project, or the one matching ``requirement_id``."""
        requirements = self.requirements.list_for_project(project_id)
        if requirement_id is not None:
            for req in requirements:
                if req.id == requirement_id:
                    return trace_requirement(req)
            return None
        return [trace_requirement(req) for req in requirements]

    def coverage_analysis(self, project_id: str) -> CoverageAnalysis:
        matrix = self.matrices.latest(project_id)
        if matrix is None:
            raise MatrixNotFoundError(f"No traceability matrix generated for project {project_id}")
        return analyze_coverage(
            matrix,
            healthy=self.settings.healthy_threshold,
            warning=self.settings.warning_threshold,
        )
