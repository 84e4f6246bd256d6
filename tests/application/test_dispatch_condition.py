"""Integration tests for the DispatchCondition use case."""

import pytest

from exdispatch.application.dispatch_condition import DispatchConditionHandler
from exdispatch.application.dto import ConditionSpec
from exdispatch.domain.exceptions import EntityNotFoundError, InvalidErrorCode, ValidationError
from exdispatch.domain.model.declarations import ExceptionDeclarations
from exdispatch.domain.model.handler import HandlerBlock
from tests.fakes import FakeHandlerBlockRepository


def _setup() -> DispatchConditionHandler:
    emp = HandlerBlock.build(
        "emp_update",
        [{"NO_DATA_FOUND", "TOO_MANY_ROWS"}, {"EMP_SAL_TOO_HIGH"}, set()],
        actions=["return null", "log", "re-raise"],
        declarations=ExceptionDeclarations.of(["EMP_SAL_TOO_HIGH"]),
    )
    child = HandlerBlock.build(
        "child_delete",
        [{"FK_VIOLATION"}, {"SALARY_RULE"}],
        declarations=ExceptionDeclarations.of(
            ["FK_VIOLATION", "SALARY_RULE"],
            {"FK_VIOLATION": -2292, "SALARY_RULE": -20500},
        ),
    )
    return DispatchConditionHandler(FakeHandlerBlockRepository([emp, child]))


class TestDispatchScenarios:

    def test_user_exception_handled_by_clause_1(self):
        dto = _setup().handle("emp_update", ConditionSpec(identifier="EMP_SAL_TOO_HIGH"))
        assert dto.handled
        assert dto.clause.position == 1
        assert dto.clause.action == "log"
        assert dto.sqlcode == 1
        assert dto.sqlerrm == "User-Defined Exception"

    def test_unknown_name_falls_to_catch_all(self):
        dto = _setup().handle("emp_update", ConditionSpec(identifier="FK_VIOLATION"))
        assert dto.clause.position == 2
        assert dto.clause.catch_all

    def test_predefined_name_lower_case(self):
        dto = _setup().handle("emp_update", ConditionSpec(identifier="no_data_found"))
        assert dto.condition == "NO_DATA_FOUND"
        assert dto.sqlcode == 100
        assert dto.clause.position == 0

    def test_predefined_name_with_surrounding_spaces(self):
        dto = _setup().handle("emp_update", ConditionSpec(identifier=" zero_divide "))
        assert dto.condition == "ZERO_DIVIDE"
        assert dto.sqlcode == -1476
        assert dto.sqlerrm == "ORA-01476: divisor is equal to zero"
        assert dto.clause.catch_all

    def test_code_resolved_to_predefined_name(self):
        dto = _setup().handle("emp_update", ConditionSpec(code=-1422))
        assert dto.condition == "TOO_MANY_ROWS"
        assert dto.clause.position == 0


class TestDispatchWithBindings:

    def test_code_only_condition_caught_by_bound_name(self):
        dto = _setup().handle("child_delete", ConditionSpec(code=-2292, message="child record found"))
        assert dto.condition == "FK_VIOLATION"
        assert dto.sqlerrm == "ORA-02292: child record found"
        assert dto.clause.position == 0

    def test_application_error_caught_by_bound_name(self):
        dto = _setup().handle(
            "child_delete",
            ConditionSpec(code=-20500, message="Salary too high", application=True),
        )
        assert dto.condition == "SALARY_RULE"
        assert dto.sqlcode == -20500
        assert dto.clause.position == 1

    def test_declared_name_reports_bound_code(self):
        dto = _setup().handle("child_delete", ConditionSpec(identifier="FK_VIOLATION"))
        assert dto.sqlcode == -2292

    def test_unhandled(self):
        dto = _setup().handle("child_delete", ConditionSpec(identifier="ZERO_DIVIDE"))
        assert not dto.handled
        assert dto.clause is None
        assert dto.sqlcode == -1476


class TestDispatchValidation:

    def test_unknown_block_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            _setup().handle("missing", ConditionSpec(identifier="A"))

    @pytest.mark.parametrize("code", [-19999, -21000])
    def test_application_code_out_of_range(self, code):
        with pytest.raises(InvalidErrorCode):
            _setup().handle("emp_update", ConditionSpec(code=code, message="x", application=True))

    def test_application_error_needs_message(self):
        with pytest.raises(ValidationError, match="--code and --message"):
            _setup().handle("emp_update", ConditionSpec(code=-20500, application=True))

    def test_condition_needs_name_or_code(self):
        with pytest.raises(ValidationError, match="name or an error code"):
            _setup().handle("emp_update", ConditionSpec())
