from api_traceability.generator.grouping import group_by_component
from api_traceability.generator.testcase import cover_component, synthesize_test_cases
from api_traceability.matrix.models import Component
from api_traceability.parser.base import Endpoint


def _make_component() -> Component:
    endpoints = [
        Endpoint(id="GET__users", path="/users", method="GET"),
        Endpoint(id="POST__users", path="/users", method="POST"),
    ]
    return group_by_component(endpoints)[0]


class TestSynthesizeTestCases:
    def test_two_cases_per_endpoint(self):
        cases = synthesize_test_cases(_make_component())
        assert [tc.id for tc in cases] == [
            "test-users-0-positive",
            "test-users-0-negative",
            "test-users-1-positive",
            "test-users-1-negative",
        ]

    def test_positive_case_shape(self):
        positive = synthesize_test_cases(_make_component())[0]
        assert positive.name == "Test GET /users - Success"
        assert positive.description == "Verify successful GET request to /users"
        assert positive.type == "api"
        assert positive.status == "pending"
        assert positive.linked_endpoints == ["GET__users"]

        assert len(positive.scenarios) == 1
        scenario = positive.scenarios[0]
        assert scenario.id == "scenario-users-0-1"
        assert scenario.expected_result == "Request should succeed with appropriate response"
        assert scenario.status == "pending"
        assert len(scenario.steps) == 1
        step = scenario.steps[0]
        assert step.id == "step-1"
        assert step.action == "Send GET request to /users"
        assert step.data == "Valid request payload"
        assert step.expected_response == "Success response (2xx)"

    def test_negative_case_shape(self):
        negative = synthesize_test_cases(_make_component())[3]
        assert negative.name == "Test POST /users - Error Handling"
        assert negative.linked_endpoints == ["POST__users"]
        scenario = negative.scenarios[0]
        assert scenario.id == "scenario-users-1-2"
        assert scenario.name == "Invalid data scenario"
        assert scenario.expected_result == "Request should fail with appropriate error message"
        assert scenario.steps[0].data == "Invalid request payload"
        assert scenario.steps[0].expected_response == "Error response (4xx/5xx)"

    def test_empty_component(self):
        assert synthesize_test_cases(Component(id="x", name="X", description="")) == []


class TestCoverComponent:
    def test_marks_endpoints_covered(self):
        covered = cover_component(_make_component())
        for index, api in enumerate(covered.apis):
            assert api.test_coverage.covered is True
            assert api.test_coverage.coverage == 100
            assert api.test_coverage.test_cases == [
                f"test-users-{index}-positive",
                f"test-users-{index}-negative",
            ]
        assert len(covered.test_cases) == 4

    def test_input_is_not_mutated(self):
        component = _make_component()
        cover_component(component)
        assert component.test_cases == []
        assert all(not api.test_coverage.covered for api in component.apis)

    def test_second_pass_overwrites(self):
        once = cover_component(_make_component())
        twice = cover_component(once)
        assert twice == once
        assert len(twice.test_cases) == 4
