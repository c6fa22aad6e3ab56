import jsonschema
import pytest

from core.models import ToolArgumentError
from core.schema import check_schema, validate_arguments

SCHEMA = {
    "type": "object",
    "properties": {
        "orderId": {"type": "string", "minLength": 1, "pattern": r"\S"},
        "amount": {"type": "number"},
        "limit": {"type": "integer", "minimum": 1, "maximum": 250, "default": 50},
        "reason": {"type": "string", "enum": ["defective", "other"]},
        "notify": {"type": "boolean", "default": True},
    },
    "required": ["orderId"],
    "additionalProperties": False,
}


class TestValidateArguments:

    def test_defaults_filled(self):
        out = validate_arguments(SCHEMA, {"orderId": "1"})
        assert out == {"orderId": "1", "limit": 50, "notify": True}

    def test_input_not_mutated(self):
        raw = {"orderId": "1"}
        validate_arguments(SCHEMA, raw)
        assert raw == {"orderId": "1"}

    def test_none_arguments_treated_as_empty(self):
        with pytest.raises(ToolArgumentError, match="'orderId' is a required property"):
            validate_arguments(SCHEMA, None)

    def test_missing_required(self):
        with pytest.raises(ToolArgumentError, match="'orderId' is a required property"):
            validate_arguments(SCHEMA, {"amount": 1})

    def test_null_value_counts_as_omitted(self):
        out = validate_arguments(SCHEMA, {"orderId": "1", "reason": None})
        assert "reason" not in out

    def test_unknown_key_rejected(self):
        with pytest.raises(ToolArgumentError, match="Additional properties are not allowed"):
            validate_arguments(SCHEMA, {"orderId": "1", "colour": "red"})

    def test_wrong_type(self):
        with pytest.raises(ToolArgumentError, match="amount: '10' is not of type 'number'"):
            validate_arguments(SCHEMA, {"orderId": "1", "amount": "10"})

    def test_bool_is_not_a_number(self):
        with pytest.raises(ToolArgumentError, match="amount: True is not of type 'number'"):
            validate_arguments(SCHEMA, {"orderId": "1", "amount": True})

    def test_int_accepted_as_number(self):
        out = validate_arguments(SCHEMA, {"orderId": "1", "amount": 10})
        assert out["amount"] == 10

    def test_enum(self):
        with pytest.raises(ToolArgumentError, match="reason: 'bored' is not one of"):
            validate_arguments(SCHEMA, {"orderId": "1", "reason": "bored"})

    @pytest.mark.parametrize("limit, message", [
        (0, "less than the minimum of 1"),
        (251, "greater than the maximum of 250"),
    ])
    def test_bounds(self, limit, message):
        with pytest.raises(ToolArgumentError, match=message):
            validate_arguments(SCHEMA, {"orderId": "1", "limit": limit})

    @pytest.mark.parametrize("order_id", ["", "   "])
    def test_blank_string_rejected(self, order_id):
        with pytest.raises(ToolArgumentError, match="orderId: "):
            validate_arguments(SCHEMA, {"orderId": order_id})

    def test_every_error_reported(self):
        with pytest.raises(ToolArgumentError) as exc:
            validate_arguments(SCHEMA, {"amount": "10", "reason": "bored"})
        message = str(exc.value)
        assert "'orderId' is a required property" in message
        assert "amount: " in message
        assert "reason: " in message

    def test_not_an_object(self):
        with pytest.raises(ToolArgumentError, match="is not of type 'object'"):
            validate_arguments(SCHEMA, ["orderId"])


class TestCheckSchema:

    def test_valid_schema_passes(self):
        check_schema(SCHEMA)

    def test_invalid_schema_raises(self):
        with pytest.raises(jsonschema.SchemaError):
            check_schema({"type": "object", "properties": {"limit": {"type": "int"}}})
