"""Integration tests for the fieldkit command line interface."""

import json

import pytest
from typer.testing import CliRunner

from fieldkit.cli.main import app


@pytest.fixture(scope="module")
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def signup_form(write_yaml, signup_definitions):
    return write_yaml("signup.yaml", {"fields": signup_definitions})


@pytest.fixture
def records():
    return [
        {
            "name": " Ada ",
            "email": "ADA@example.com",
            "age": "42",
            "birthday": "15.01.1990",
            "terms": "evet",
        },
        {"name": "Bob", "email": "bob", "terms": True},
    ]


class TestTypesCommand:
    """Test the types command."""

    def test_lists_builtin_types(self, runner):
        """Verify the table shows type names and classes."""
        # Act
        result = runner.invoke(app, ["types"])

        # Assert
        assert result.exit_code == 0
        assert "checkbox" in result.output
        assert "BooleanField" in result.output

    def test_json_output(self, runner):
        """Verify JSON output maps names to classes."""
        # Act
        result = runner.invoke(app, ["types", "--json"])

        # Assert
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["checkbox"] == "BooleanField"
        assert data["integer"] == "NumberField"


class TestDescribeCommand:
    """Test the describe command."""

    def test_describes_nested_fields(self, runner, write_json):
        """Verify composite children are listed."""
        # Arrange
        form = write_json(
            "form.json",
            [
                {"type": "email", "name": "email", "config": {"required": True}},
                {"type": "group", "name": "address", "fields": [{"type": "string", "name": "street"}]},
            ],
        )

        # Act
        result = runner.invoke(app, ["describe", str(form)])

        # Assert
        assert result.exit_code == 0
        for text in ("email", "address", "group", "street", "yes"):
            assert text in result.output

    def test_missing_file(self, runner, tmp_path):
        """Verify a missing definition file exits with code 1."""
        # Act
        result = runner.invoke(app, ["describe", str(tmp_path / "missing.yaml")])

        # Assert
        assert result.exit_code == 1
        assert "Failed to load fields" in result.output

    def test_verbose(self, runner, signup_form):
        """Verify verbose mode reports what was loaded."""
        # Act
        result = runner.invoke(app, ["-v", "describe", str(signup_form)])

        # Assert
        assert result.exit_code == 0
        assert "Loaded 5 field(s)" in result.output


class TestImportCommand:
    """Test the import command."""

    def test_all_records_valid(self, runner, signup_form, write_json, records):
        """Verify a clean import exits with code 0."""
        # Arrange
        data = write_json("data.json", records[:1])

        # Act
        result = runner.invoke(app, ["import", str(signup_form), str(data)])

        # Assert
        assert result.exit_code == 0
        assert "1/1 record(s) imported" in result.output

    def test_reports_issues(self, runner, signup_form, write_json, records):
        """Verify failing records are listed with their field."""
        # Arrange
        data = write_json("data.json", records)

        # Act
        result = runner.invoke(app, ["import", str(signup_form), str(data)])

        # Assert
        assert result.exit_code == 1
        assert "Record 1" in result.output
        assert "Enter a valid email address" in result.output
        assert "1/2 record(s) imported" in result.output

    def test_json_report(self, runner, signup_form, write_json, records):
        """Verify the JSON report carries exported values and issues."""
        # Arrange
        data = write_json("data.json", records)

        # Act
        result = runner.invoke(app, ["import", str(signup_form), str(data), "--json"])

        # Assert
        assert result.exit_code == 1
        report = json.loads(result.output)
        assert report["valid"] is False
        first, second = report["records"]
        assert first["issues"] == []
        assert first["values"] == {
            "name": "Ada",
            "email": "ada@example.com",
            "age": 42,
            "birthday": "1990-01-15T00:00:00.000Z",
            "terms": True,
        }
        assert second["values"]["age"] is None
        assert second["issues"] == [
            {"field": "email", "message": "Enter a valid email address", "path": [], "code": "invalid_string"}
        ]

    def test_nested_issue_path(self, runner, write_yaml):
        """Verify composite issues are located inside the composite."""
        # Arrange
        form = write_yaml(
            "form.yaml",
            [
                {
                    "type": "array",
                    "name": "contacts",
                    "fields": [{"type": "email", "name": "email", "config": {"required": True}}],
                }
            ],
        )
        data = write_yaml("data.yaml", {"contacts": [{"email": "a@b.co"}, {"email": "nope"}]})

        # Act
        result = runner.invoke(app, ["import", str(form), str(data), "--json"])

        # Assert
        issue = json.loads(result.output)["records"][0]["issues"][0]
        assert issue["field"] == "contacts"
        assert issue["path"] == [1, "email"]

    def test_bad_data_file(self, runner, signup_form, write_json):
        """Verify unusable data files exit with code 1."""
        # Arrange
        data = write_json("data.json", [1, 2])

        # Act
        result = runner.invoke(app, ["import", str(signup_form), str(data), "--json"])

        # Assert
        assert result.exit_code == 1
        assert "Failed to load data" in json.loads(result.output)["error"]
