"""Unit tests for the pydantic-backed Schema builder."""

import re
from datetime import datetime, time

import pytest

from fieldkit.models.enums import IssueCode
from fieldkit.schema import Schema, is_number


class TestBaseRules:
    """Test suite for the type-level schema constructors."""

    @pytest.mark.parametrize(
        "schema, value",
        [
            (Schema.string(), "text"),
            (Schema.number(), 3),
            (Schema.number(), 2.5),
            (Schema.boolean(), False),
            (Schema.datetime(), datetime(2024, 1, 15)),
            (Schema.time(), time(9, 30)),
            (Schema.mapping(), {"a": 1}),
            (Schema.any(), None),
        ],
    )
    def test_accepts_matching_type(self, schema, value):
        """Verify each constructor accepts values of its type."""
        # Act
        result = schema.validate(value)

        # Assert
        assert result.success
        assert result.data == value

    @pytest.mark.parametrize(
        "schema, value",
        [
            (Schema.string(), 5),
            (Schema.number(), "5"),
            (Schema.number(), True),
            (Schema.number(), float("nan")),
            (Schema.boolean(), 1),
            (Schema.mapping(), [1, 2]),
        ],
    )
    def test_rejects_other_types(self, schema, value):
        """Verify mismatched types fail with invalid_type."""
        # Act
        result = schema.validate(value)

        # Assert
        assert not result.success
        assert result.first_issue.code == IssueCode.INVALID_TYPE
        assert result.first_issue.message == "Invalid value"

    def test_none_reports_required(self):
        """Verify None fails with the required code and message."""
        # Act
        result = Schema.string().validate(None)

        # Assert
        assert result.first_issue.code == IssueCode.REQUIRED
        assert result.first_issue.message == "This field is required"

    def test_custom_type_message(self):
        """Verify a constructor can carry its own type message."""
        # Act
        result = Schema.datetime("Enter a valid date").validate("soon")

        # Assert
        assert result.first_issue.message == "Enter a valid date"

    def test_is_number_excludes_bool_and_nan(self):
        """Verify is_number treats booleans and NaN as non-numbers."""
        # Assert
        assert is_number(1) and is_number(1.5)
        assert not is_number(True)
        assert not is_number(float("nan"))
        assert not is_number("1")


class TestRefinements:
    """Test suite for schema refinement builders."""

    def test_builders_return_new_schemas(self):
        """Verify refining a schema leaves the original untouched."""
        # Arrange
        base = Schema.string()

        # Act
        refined = base.min_length(3, "Too short")

        # Assert
        assert base.is_valid("ab")
        assert not refined.is_valid("ab")

    def test_check_reports_code_and_message(self):
        """Verify check failures carry the given message and code."""
        # Arrange
        schema = Schema.number().check(lambda value: value % 2 == 0, "Must be even", IssueCode.CUSTOM)

        # Act
        result = schema.validate(3)

        # Assert
        assert result.first_issue.message == "Must be even"
        assert result.first_issue.code == IssueCode.CUSTOM
        assert result.first_issue.path == ()

    def test_rules_stop_at_first_failure(self):
        """Verify only the first failing rule is reported."""
        # Arrange
        schema = Schema.string().min_length(5, "Too short").pattern(r"^\d+$", "Digits only")

        # Act
        result = schema.validate("ab")

        # Assert
        assert [issue.message for issue in result.issues] == ["Too short"]

    @pytest.mark.parametrize(
        "schema, good, bad, code",
        [
            (Schema.string().min_length(2, "m"), "ab", "a", IssueCode.TOO_SMALL),
            (Schema.string().max_length(2, "m"), "ab", "abc", IssueCode.TOO_BIG),
            (Schema.number().minimum(0, "m"), 0, -1, IssueCode.TOO_SMALL),
            (Schema.number().maximum(10, "m"), 10, 11, IssueCode.TOO_BIG),
            (Schema.string().pattern(re.compile(r"\d"), "m"), "a1", "ab", IssueCode.INVALID_STRING),
        ],
    )
    def test_bound_rules(self, schema, good, bad, code):
        """Verify the bound helpers accept inclusive limits and report codes."""
        # Assert
        assert schema.is_valid(good)
        assert schema.validate(bad).first_issue.code == code

    def test_transform_replaces_output(self):
        """Verify transform changes the validated data."""
        # Act
        result = Schema.string().transform(str.upper).validate("abc")

        # Assert
        assert result.data == "ABC"

    def test_preprocess_runs_before_rules(self):
        """Verify preprocess feeds the rules a normalized value."""
        # Arrange
        schema = Schema.string().min_length(1, "Required").preprocess(
            lambda value: "" if value is None else value.strip()
        )

        # Act & Assert
        assert schema.validate("  x ").data == "x"
        assert schema.validate(None).first_issue.message == "Required"

    def test_nullable_skips_other_rules(self):
        """Verify nullable accepts None without running later rules."""
        # Arrange
        schema = Schema.string().min_length(3, "Too short").nullable()

        # Act
        result = schema.validate(None)

        # Assert
        assert result.success
        assert result.data is None
        assert not schema.is_valid("ab")


class TestStructuralSchemas:
    """Test suite for object and array schemas."""

    def test_object_validates_children_and_drops_unknown_keys(self):
        """Verify object schemas return plain dicts of child results."""
        # Arrange
        schema = Schema.object_of(
            {"name": Schema.string().transform(str.strip), "age": Schema.number().nullable()}
        )

        # Act
        result = schema.validate({"name": " Ada ", "extra": True})

        # Assert
        assert result.success
        assert result.data == {"name": "Ada", "age": None}

    def test_object_issue_path_uses_child_key(self):
        """Verify child failures carry the child key in their path."""
        # Arrange
        schema = Schema.object_of({"email address": Schema.string()})

        # Act
        result = schema.validate({})

        # Assert
        assert result.first_issue.path == ("email address",)
        assert result.first_issue.code == IssueCode.REQUIRED

    def test_object_rejects_non_mapping(self):
        """Verify non-mapping input fails with invalid_type."""
        # Act
        result = Schema.object_of({"a": Schema.any()}).validate("a")

        # Assert
        assert result.first_issue.code == IssueCode.INVALID_TYPE

    def test_array_paths_carry_index(self):
        """Verify array issues point at the failing row."""
        # Arrange
        schema = Schema.array_of(Schema.object_of({"qty": Schema.number()}))

        # Act
        result = schema.validate([{"qty": 1}, {"qty": "x"}])

        # Assert
        assert result.first_issue.path == (1, "qty")

    def test_array_accepts_tuples(self):
        """Verify tuples validate into lists."""
        # Act
        result = Schema.array_of(Schema.number()).validate((1, 2))

        # Assert
        assert result.data == [1, 2]
