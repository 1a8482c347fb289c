"""Test case synthesis: a success and an error-handling case per endpoint.

Cases are descriptors, not executable tests. Payloads are fixed
placeholders rather than values derived from request schemas.
"""

from api_traceability.matrix.models import Component, TestCase, TestScenario, TestStep
from api_traceability.parser.base import Endpoint, TestCoverage


def _positive_case(component_id: str, index: int, endpoint: Endpoint) -> TestCase:
    return TestCase(
        id=f"test-{component_id}-{index}-positive",
        name=f"Test {endpoint.method} {endpoint.path} - Success",
        description=f"Verify successful {endpoint.method} request to {endpoint.path}",
        scenarios=[
            TestScenario(
                id=f"scenario-{component_id}-{index}-1",
                name="Happy path scenario",
                description="Test with valid data and expected successful response",
                steps=[
                    TestStep(
                        action=f"Send {endpoint.method} request to {endpoint.path}",
                        data="Valid request payload",
                        expected_response="Success response (2xx)",
                    )
                ],
                expected_result="Request should succeed with appropriate response",
            )
        ],
        linked_endpoints=[endpoint.id],
    )


def _negative_case(component_id: str, index: int, endpoint: Endpoint) -> TestCase:
    return TestCase(
        id=f"test-{component_id}-{index}-negative",
        name=f"Test {endpoint.method} {endpoint.path} - Error Handling",
        description=f"Verify error handling for {endpoint.method} request to {endpoint.path}",
        scenarios=[
            TestScenario(
                id=f"scenario-{component_id}-{index}-2",
                name="Invalid data scenario",
                description="Test with invalid data and expected error response",
                steps=[
                    TestStep(
                        action=f"Send {endpoint.method} request to {endpoint.path}",
                        data="Invalid request payload",
                        expected_response="Error response (4xx/5xx)",
                    )
                ],
                expected_result="Request should fail with appropriate error message",
            )
        ],
        linked_endpoints=[endpoint.id],
    )


def synthesize_test_cases(component: Component) -> list[TestCase]:
    """Positive then negative case for each endpoint, in ``apis`` order."""
    cases = []
    for index, endpoint in enumerate(component.apis):
        cases.append(_positive_case(component.id, index, endpoint))
        cases.append(_negative_case(component.id, index, endpoint))
    return cases


def cover_component(component: Component) -> Component:
    """Return a copy of ``component`` with test cases and fully covered endpoints.

    The input is left untouched. Any test cases or coverage already on
    it are replaced, not accumulated.
    """
    cases = synthesize_test_cases(component)
    apis = [
        endpoint.model_copy(
            update={
                "test_coverage": TestCoverage(
                    covered=True,
                    test_cases=[cases[2 * i].id, cases[2 * i + 1].id],
                    coverage=100,
                )
            }
        )
        for i, endpoint in enumerate(component.apis)
    ]
    return component.model_copy(update={"apis": apis, "test_cases": cases})
