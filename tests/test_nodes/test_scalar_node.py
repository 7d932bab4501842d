"""Tests for ScalarNode, NumberNode and the Scalar factory."""

import pytest

from valueschema import messages
from valueschema.invariant import InvariantError
from valueschema.nodes import NumberNode, Scalar, ScalarNode, is_invalid


class TestScalarNode:
    """Test string scalar conversion."""

    def test_serialize_none(self):
        assert ScalarNode.create().serialize(None) == ""

    def test_deserialize_empty(self):
        assert ScalarNode.create().deserialize("") is None

    def test_pass_through(self):
        node = ScalarNode.create()

        for text in ["a", " ", "hello world", "0"]:
            assert node.serialize(text) == text
            assert node.deserialize(text) == text

    def test_falsy_values_are_not_special(self):
        """Test that only None and "" are treated as missing."""
        node = ScalarNode.create()

        assert node.serialize(0) == 0
        assert node.serialize(False) is False
        assert node.deserialize(0) == 0


class TestNumberNode:
    """Test number scalar conversion."""

    def test_deserialize_empty(self):
        assert NumberNode.create().deserialize("") is None

    def test_deserialize_float(self):
        assert NumberNode.create().deserialize("3.14") == 3.14

    def test_deserialize_returns_float(self):
        result = NumberNode.create().deserialize("42")

        assert result == 42.0
        assert isinstance(result, float)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-2.5", -2.5),
            ("1e3", 1000.0),
            (" 3 ", 3.0),
            ("0", 0.0),
            (".5", 0.5),
        ],
    )
    def test_valid_text(self, text, expected):
        assert NumberNode.create().deserialize(text) == expected

    def test_invalid_text_returns_error(self):
        """Test that unparseable text is reported as a value."""
        result = NumberNode.create().deserialize("abc")

        assert isinstance(result, ValueError)
        assert str(result) == messages.INVALID_VALUE
        assert is_invalid(result)

    @pytest.mark.parametrize(
        "text",
        [
            "  ",
            "3.14x",
            "inf",
            "-inf",
            "Infinity",
            "nan",
            "1_000",
            "1e400",
            "0x10",
        ],
    )
    def test_invalid_edge_cases(self, text):
        assert is_invalid(NumberNode.create().deserialize(text))

    def test_numbers_are_accepted(self):
        node = NumberNode.create()

        assert node.deserialize(5) == 5.0
        assert node.deserialize(2.5) == 2.5

    @pytest.mark.parametrize("value", [None, True, False, [1], 10**400])
    def test_non_numeric_values(self, value):
        assert is_invalid(NumberNode.create().deserialize(value))

    def test_serialize_is_inherited(self):
        node = NumberNode.create()

        assert node.serialize(None) == ""
        assert node.serialize(3.14) == 3.14


class TestIsInvalid:
    """Test is_invalid helper."""

    def test_successful_results(self):
        assert is_invalid(None) is False
        assert is_invalid(1.0) is False
        assert is_invalid("text") is False


class TestScalarFactory:
    """Test the Scalar factory dispatch."""

    def test_default_is_string(self):
        assert type(Scalar()) is ScalarNode
        assert type(Scalar({})) is ScalarNode
        assert type(Scalar(None)) is ScalarNode

    def test_string_type(self):
        assert type(Scalar({"type": "string"})) is ScalarNode

    def test_number_type(self):
        node = Scalar({"type": "number"})

        assert type(node) is NumberNode
        assert isinstance(node, ScalarNode)

    def test_falsy_type_defaults_to_string(self):
        assert type(Scalar({"type": None})) is ScalarNode
        assert type(Scalar(type="")) is ScalarNode

    def test_invalid_type(self):
        with pytest.raises(InvariantError, match='invalid type "bogus" supplied to Scalar'):
            Scalar({"type": "bogus"})

    def test_invalid_type_is_assertion_error(self):
        with pytest.raises(AssertionError):
            Scalar(type="date")

    def test_unhashable_type(self):
        with pytest.raises(InvariantError):
            Scalar({"type": ["number"]})

    def test_props_are_kept(self):
        node = Scalar({"type": "number"}, default_value=0, label="Age")

        assert node.props == {"type": "number", "default_value": 0, "label": "Age"}

    def test_keyword_props_override_mapping(self):
        node = Scalar({"type": "string"}, type="number")

        assert type(node) is NumberNode
