import pytest

from renobudget.domain.errors import BadRequest
from renobudget.services.validation import is_valid_project_type, sanitize_number, validate_inputs


def test_sanitize_number():
    assert sanitize_number("$300,000") == 300000.0
    assert sanitize_number("90000.50") == 90000.5
    assert sanitize_number(125000) == 125000.0
    assert sanitize_number("") is None
    assert sanitize_number("abc") is None
    assert sanitize_number(None) is None
    assert sanitize_number("1.2.3") is None


def test_project_type_check():
    assert is_valid_project_type("Kitchen")
    assert not is_valid_project_type("select")
    assert not is_valid_project_type("")
    assert not is_valid_project_type(None)
    assert not is_valid_project_type("Pool")


def test_valid_inputs_pass_through():
    inp = validate_inputs("$300,000", "90,000", "Kitchen")
    assert inp.home_value == 300000.0
    assert inp.yearly_income == 90000.0
    assert inp.project_type == "Kitchen"


def test_bounds_are_inclusive():
    inp = validate_inputs(50000, 8000, "Bathroom")
    assert inp.home_value == 50000
    inp = validate_inputs(10_000_000, 10_000_000, "Bathroom")
    assert inp.yearly_income == 10_000_000


def test_all_problems_reported_together():
    with pytest.raises(BadRequest) as exc:
        validate_inputs(49999, 7999, "select")
    msg = exc.value.message
    assert msg.startswith("Please check your inputs:")
    assert "Home value must be at least $50,000.00" in msg
    assert "Yearly income must be at least $8,000.00" in msg
    assert "Project type must be selected" in msg
    assert exc.value.status_code == 400


def test_upper_bound_and_missing_values():
    with pytest.raises(BadRequest) as exc:
        validate_inputs(20_000_000, "", "Kitchen")
    assert "Home value must be at most" in exc.value.message
    assert "Yearly income must be a number" in exc.value.message


def test_income_upper_bound():
    with pytest.raises(BadRequest) as exc:
        validate_inputs(300000, 10_000_001, "Kitchen")
    assert "Yearly income must be at most $10,000,000.00" in exc.value.message
    assert "Home value" not in exc.value.message
