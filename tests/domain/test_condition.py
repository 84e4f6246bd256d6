"""Unit tests for the Condition value object."""

import dataclasses

import pytest

from exdispatch.domain.exceptions import InvalidErrorCode, ValidationError
from exdispatch.domain.model import predefined
from exdispatch.domain.model.condition import Condition, ConditionKind


class TestSystemConditions:

    def test_predefined_name_binds_its_code(self):
        c = Condition.system("too_many_rows")
        assert c.identifier == "TOO_MANY_ROWS"
        assert c.code == -1422
        assert c.kind == ConditionKind.SYSTEM
        assert c.sqlcode == -1422
        assert c.sqlerrm == "ORA-01422: exact fetch returns more than requested number of rows"

    def test_no_data_found_reports_plus_100(self):
        c = Condition.system("NO_DATA_FOUND")
        assert c.sqlcode == 100
        assert c.sqlerrm == "ORA-01403: no data found"

    def test_custom_message_kept(self):
        c = Condition.system("ZERO_DIVIDE", "divide by zero in bonus calc")
        assert c.sqlerrm == "ORA-01476: divide by zero in bonus calc"

    def test_unknown_predefined_name_rejected(self):
        with pytest.raises(ValidationError, match="not a predefined exception"):
            Condition.system("FK_VIOLATION")

    def test_code_only_condition(self):
        c = Condition.from_code(-2292, "integrity constraint violated - child record found")
        assert c.identifier is None
        assert c.label == "ORA-02292"
        assert c.sqlcode == -2292


class TestUserDefinedConditions:

    def test_named_condition_is_upper_cased(self):
        c = Condition.named("emp_sal_too_high")
        assert c.identifier == "EMP_SAL_TOO_HIGH"
        assert c.code is None
        assert c.kind == ConditionKind.USER_DEFINED

    def test_unbound_user_exception_reports_sqlcode_1(self):
        c = Condition.named("EMP_SAL_TOO_HIGH", "ignored for SQLERRM")
        assert c.sqlcode == 1
        assert c.sqlerrm == "User-Defined Exception"

    def test_bound_user_exception_reports_its_code(self):
        c = Condition.named("FK_VIOLATION").with_code(-2292)
        assert c.sqlcode == -2292


class TestApplicationErrors:

    def test_code_in_range_accepted(self):
        c = Condition.application_error(-20500, "Salary too high")
        assert c.kind == ConditionKind.APPLICATION
        assert c.code == -20500
        assert c.sqlerrm == "ORA-20500: Salary too high"

    @pytest.mark.parametrize("code", [-19999, -21000])
    def test_code_out_of_range_rejected(self, code):
        with pytest.raises(InvalidErrorCode):
            Condition.application_error(code, "Salary too high")

    def test_blank_message_rejected(self):
        with pytest.raises(ValidationError, match="require a message"):
            Condition.application_error(-20500, "  ")

    def test_missing_code_rejected(self):
        with pytest.raises(ValidationError, match="require an error code"):
            Condition(message="x", kind=ConditionKind.APPLICATION)

    def test_with_identifier_keeps_code_validation(self):
        c = Condition.application_error(-20001, "bad").with_identifier("BAD_INPUT")
        assert c.identifier == "BAD_INPUT"
        assert c.code == -20001


class TestConditionInvariants:

    def test_needs_identifier_or_code(self):
        with pytest.raises(ValidationError, match="needs an exception name or an error code"):
            Condition()

    def test_non_integer_code_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Condition(code="-1422")

    def test_is_immutable(self):
        c = Condition.named("X")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.identifier = "Y"

    def test_equal_by_value(self):
        assert Condition.named("x") == Condition.named("X")

    def test_str_for_named_condition(self):
        assert str(Condition.system("ZERO_DIVIDE")) == "ZERO_DIVIDE (ORA-01476: divisor is equal to zero)"


class TestPredefinedLookups:

    def test_lookup_ignores_case_and_surrounding_spaces(self):
        assert predefined.is_predefined(" zero_divide ")
        assert predefined.code_for("  No_Data_Found") == 100

    def test_unknown_name(self):
        assert not predefined.is_predefined("FK_VIOLATION")
        assert predefined.code_for("FK_VIOLATION") is None
