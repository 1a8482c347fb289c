"""Assemble traceability matrices and their aggregate test metrics."""

import logging
from datetime import datetime, timezone

from api_traceability.generator.grouping import group_by_component
from api_traceability.generator.testcase import cover_component
from api_traceability.matrix.models import Component, Matrix, TestMetrics
from api_traceability.parser.base import SpecDocument
from api_traceability.parser.swagger import extract_endpoints

logger = logging.getLogger(__name__)


def aggregate(components: list[Component], now: datetime | None = None) -> TestMetrics:
    """Sum endpoint and test case counts across components.

    Nothing has been executed at this stage, so every test case is pending.
    """
    total_endpoints = sum(len(c.apis) for c in components)
    tested_endpoints = sum(1 for c in components for api in c.apis if api.test_coverage.covered)
    total_test_cases = sum(len(c.test_cases) for c in components)

    return TestMetrics(
        total_endpoints=total_endpoints,
        tested_endpoints=tested_endpoints,
        coverage_percentage=(tested_endpoints / total_endpoints) * 100 if total_endpoints > 0 else 0,
        total_test_cases=total_test_cases,
        passed_tests=0,
        failed_tests=0,
        pending_tests=total_test_cases,
        last_updated=now or datetime.now(timezone.utc),
    )


def generate_matrix(
    project_id: str,
    doc: SpecDocument,
    include_tests: bool = True,
    now: datetime | None = None,
) -> Matrix:
    """Extract, group, optionally synthesize test cases, then aggregate."""
    now = now or datetime.now(timezone.utc)

    endpoints = extract_endpoints(doc)
    components = group_by_component(endpoints)
    if include_tests:
        components = [cover_component(c) for c in components]

    metrics = aggregate(components, now=now)
    logger.debug(
        "Matrix for %s: %d endpoints in %d components, %d test cases",
        project_id,
        metrics.total_endpoints,
        len(components),
        metrics.total_test_cases,
    )

    info = doc.get("info")
    if not isinstance(info, dict):
        info = {}
    return Matrix(
        id=f"matrix-{project_id}-{int(now.timestamp() * 1000)}",
        project_name=str(info.get("title") or ""),
        version=str(info.get("version") or ""),
        created_at=now,
        components=components,
        test_metrics=metrics,
    )
