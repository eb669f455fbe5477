"""Unit tests for boolean, select and multiselect fields."""

import pytest

from fieldkit.fields import BooleanField, MultiselectField, SelectField
from fieldkit.models import IssueCode

COUNTRIES = [
    {"value": "tr", "label": "Turkey", "group": "Europe"},
    {"value": "us", "label": "United States", "group": "America"},
    {"value": "de", "label": "Germany", "group": "Europe"},
    {"value": "old", "label": "Old Country", "disabled": True},
]


class TestBooleanField:
    """Test suite for BooleanField."""

    def test_required_means_checked(self):
        """Verify a required boolean only accepts True."""
        # Arrange
        schema = BooleanField("terms", config={"required": True}).schema()

        # Act
        result = schema.validate(False)

        # Assert
        assert result.first_issue.message == "This box must be checked"
        assert schema.is_valid(True)

    def test_optional_still_rejects_none(self):
        """Verify None is not a boolean even when optional."""
        # Arrange
        field = BooleanField("newsletter")

        # Act & Assert
        assert not field.schema().is_valid(None)
        assert field.schema().is_valid(False)
        assert field.create_value().valid() is False

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("Evet", True), ("1", True), (1, True), ("hayır", False), (0, False), (False, False)],
    )
    def test_import_words(self, raw, expected):
        """Verify boolean words and numbers are imported."""
        # Act
        result = BooleanField("newsletter").from_import_with_details(raw)

        # Assert
        assert result.success
        assert result.data is expected

    @pytest.mark.parametrize("raw", ["maybe", 2, [True]])
    def test_import_rejects_other_values(self, raw):
        """Verify unknown words and numbers fail as invalid types."""
        # Act
        result = BooleanField("newsletter").from_import_with_details(raw)

        # Assert
        assert result.error.code == IssueCode.INVALID_TYPE

    def test_required_import_of_false_fails(self):
        """Verify imported False fails a required boolean."""
        # Act
        result = BooleanField("terms", config={"required": True}).from_import_with_details("false")

        # Assert
        assert result.error.message == "This box must be checked"

    def test_present_labels(self):
        """Verify default and configured labels."""
        # Arrange
        field = BooleanField("terms", config={"true_label": "Evet", "false_label": "Hayır"})

        # Act & Assert
        assert BooleanField("terms").present(True) == "Yes"
        assert BooleanField("terms").present(False) == "No"
        assert field.present(True) == "Evet"
        assert field.present(False) == "Hayır"
        assert field.present(None) == "-"


class TestSelectField:
    """Test suite for SelectField."""

    @pytest.fixture
    def field(self):
        return SelectField("country", "Country", {"options": COUNTRIES})

    def test_disabled_option_is_invalid(self, field):
        """Verify disabled options are listed but not selectable."""
        # Act
        result = field.schema().validate("old")

        # Assert
        assert result.first_issue.message == "Select a valid option"
        assert result.first_issue.code == IssueCode.INVALID_ENUM_VALUE
        assert field.from_import("old") is None
        assert field.active_values() == ["tr", "us", "de"]

    def test_import_by_value_or_label(self, field):
        """Verify imports match values exactly and labels case-insensitively."""
        # Act & Assert
        assert field.from_import("tr") == "tr"
        assert field.from_import("united states") == "us"
        assert field.from_import("Narnia") is None

    def test_booleans_and_numbers_stay_apart(self):
        """Verify True does not match the option value 1."""
        # Arrange
        field = SelectField("answer", config={"options": [{"value": 1, "label": "One"}]})

        # Act & Assert
        assert field.from_import(1) == 1
        assert field.from_import(True) is None

    def test_present_uses_label(self, field):
        """Verify values render as their label, unknown values as text."""
        # Act & Assert
        assert field.present("de") == "Germany"
        assert field.present("zz") == "zz"
        assert field.present(None) == "-"

    def test_grouped_options(self, field):
        """Verify options are grouped in first-seen order."""
        # Act
        grouped = field.grouped_options()

        # Assert
        assert list(grouped) == ["Europe", "America", None]
        assert [option["value"] for option in grouped["Europe"]] == ["tr", "de"]

    def test_optional_accepts_none(self, field):
        """Verify an optional select accepts no selection."""
        # Act & Assert
        assert field.schema().is_valid(None)
        assert not SelectField("country", config={"options": COUNTRIES, "required": True}).schema().is_valid(None)


class TestMultiselectField:
    """Test suite for MultiselectField."""

    @pytest.fixture
    def field(self):
        return MultiselectField("visited", "Visited", {"options": COUNTRIES})

    def test_import_comma_text(self, field):
        """Verify comma text is split and unknown entries dropped."""
        # Act & Assert
        assert field.from_import("Turkey, us, nope") == ["tr", "us"]

    def test_import_with_nothing_matched(self, field):
        """Verify input with no known entry fails."""
        # Act & Assert
        assert field.from_import("nope") is None
        assert field.from_import(["nope"]) is None

    def test_labels_match_exactly(self, field):
        """Verify multiselect labels are matched case-sensitively."""
        # Act & Assert
        assert field.from_import(["turkey", "Germany"]) == ["de"]

    def test_selection_bounds(self):
        """Verify min and max selection counts."""
        # Arrange
        field = MultiselectField(
            "visited", config={"options": COUNTRIES, "min_selections": 2, "max_selections": 2}
        )

        # Act & Assert
        assert field.schema().validate(["tr"]).first_issue.message == "Select at least 2 options"
        assert field.schema().validate(["tr", "us", "de"]).first_issue.message == "Select at most 2 options"
        assert field.is_max_reached(2)
        assert not field.is_max_reached(1)

    def test_disabled_entry_is_invalid(self, field):
        """Verify each entry must be an active option."""
        # Act
        result = field.schema().validate(["tr", "old"])

        # Assert
        assert result.first_issue.message == "Select a valid option"
        assert result.first_issue.path == (1,)

    def test_present_and_preview(self, field):
        """Verify labels are joined and previews summarise."""
        # Act & Assert
        assert field.present(["tr", "us"]) == "Turkey, United States"
        assert field.filter_preview(["tr"]) == "Turkey"
        assert field.filter_preview(["tr", "us"]) == "2 selected"
        assert field.filter_preview([]) is None
        assert field.all_values() == ["tr", "us", "de"]
