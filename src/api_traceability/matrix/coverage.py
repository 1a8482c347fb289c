"""Coverage analysis derived from a generated matrix."""

from api_traceability.matrix.models import (
    ComponentCoverage,
    CoverageAnalysis,
    CoverageGap,
    CoverageSummary,
    EndpointRef,
    Matrix,
)
from api_traceability.parser.base import Endpoint


def _percentage(covered: int, total: int) -> float:
    return (covered / total) * 100 if total > 0 else 0


def component_status(percentage: float, healthy: float = 80.0, warning: float = 60.0) -> str:
    if percentage >= healthy:
        return "healthy"
    if percentage >= warning:
        return "warning"
    return "error"


def _has_negative_case(endpoint: Endpoint) -> bool:
    return any(tc.endswith("-negative") for tc in endpoint.test_coverage.test_cases)


def analyze_coverage(matrix: Matrix, healthy: float = 80.0, warning: float = 60.0) -> CoverageAnalysis:
    """Build the overall, per-component and gap report for ``matrix``."""
    by_component = []
    gaps = []
    total = covered = 0

    for component in matrix.components:
        uncovered = [api for api in component.apis if not api.test_coverage.covered]
        component_covered = len(component.apis) - len(uncovered)
        percentage = _percentage(component_covered, len(component.apis))

        by_component.append(
            ComponentCoverage(
                component_id=component.id,
                name=component.name,
                total_endpoints=len(component.apis),
                covered_endpoints=component_covered,
                coverage_percentage=percentage,
                status=component_status(percentage, healthy, warning),
                uncovered_endpoints=[EndpointRef(path=api.path, method=api.method) for api in uncovered],
            )
        )

        for api in component.apis:
            if not api.test_coverage.covered:
                gaps.append(
                    CoverageGap(
                        type="untested_endpoint",
                        endpoint=api.path,
                        method=api.method,
                        component=component.id,
                        severity="medium",
                    )
                )
            elif not _has_negative_case(api):
                gaps.append(
                    CoverageGap(
                        type="missing_negative_tests",
                        endpoint=api.path,
                        method=api.method,
                        component=component.id,
                        severity="high",
                    )
                )

        total += len(component.apis)
        covered += component_covered

    return CoverageAnalysis(
        overall=CoverageSummary(
            total_endpoints=total,
            covered_endpoints=covered,
            coverage_percentage=_percentage(covered, total),
        ),
        by_component=by_component,
        gaps=gaps,
    )
