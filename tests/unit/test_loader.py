"""Unit tests for reading definition and data files."""

import pytest

from fieldkit.exceptions import DefinitionError, LoadError
from fieldkit.fields import EmailField, GroupField
from fieldkit.loader import FileReader, load_definitions, load_fields, load_records


class TestFileReader:
    """Test suite for FileReader."""

    def test_reads_yaml_and_json(self, write_yaml, write_json):
        """Verify both formats are parsed."""
        # Arrange
        yaml_path = write_yaml("form.yaml", {"a": [1, 2]})
        json_path = write_json("form.json", {"a": [1, 2]})

        # Act & Assert
        assert FileReader.read_file(yaml_path) == {"a": [1, 2]}
        assert FileReader.read_file(json_path) == {"a": [1, 2]}

    def test_missing_file(self, tmp_path):
        """Verify a missing file raises LoadError with its path."""
        # Arrange
        path = tmp_path / "nope.yaml"

        # Act
        with pytest.raises(LoadError, match="File not found") as exc_info:
            FileReader.read_file(path)

        # Assert
        assert exc_info.value.file_path == str(path)

    def test_unsupported_suffix(self, tmp_path):
        """Verify unknown extensions are rejected."""
        # Arrange
        path = tmp_path / "form.toml"
        path.write_text("a = 1", encoding="utf-8")

        # Act & Assert
        with pytest.raises(LoadError, match="Unsupported file format"):
            FileReader.read_file(path)

    @pytest.mark.parametrize(
        "name,content,match",
        [("broken.yaml", "a: [1, 2", "Error parsing YAML"), ("broken.json", "{oops", "Error parsing JSON")],
    )
    def test_parse_errors(self, tmp_path, name, content, match):
        """Verify parser errors are wrapped."""
        # Arrange
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")

        # Act & Assert
        with pytest.raises(LoadError, match=match):
            FileReader.read_file(path)

    def test_encoding_error(self, tmp_path):
        """Verify undecodable files are wrapped."""
        # Arrange
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff"}')

        # Act & Assert
        with pytest.raises(LoadError, match="Encoding error"):
            FileReader.read_file(path)


class TestLoadDefinitions:
    """Test suite for definition documents."""

    def test_list_document(self, write_yaml, signup_definitions):
        """Verify a top-level list is accepted."""
        # Arrange
        path = write_yaml("signup.yaml", signup_definitions)

        # Act & Assert
        assert load_definitions(path) == signup_definitions

    def test_mapping_document(self, write_json, signup_definitions):
        """Verify a mapping with a fields key is accepted."""
        # Arrange
        path = write_json("signup.json", {"title": "Signup", "fields": signup_definitions})

        # Act & Assert
        assert load_definitions(path) == signup_definitions

    def test_mapping_without_fields(self, write_json):
        """Verify mappings must hold a fields list."""
        # Arrange
        path = write_json("form.json", {"title": "Signup"})

        # Act & Assert
        with pytest.raises(DefinitionError, match="'fields' key"):
            load_definitions(path)

    @pytest.mark.parametrize(
        "document,match",
        [
            ({"fields": "name"}, "must be a list"),
            ([1], r"fields\[0\] must be a mapping"),
            ([{"type": "string"}], "missing required keys: name"),
            ([{"name": "x", "type": "string", "config": [1]}], "config must be a mapping"),
            (
                [{"name": "g", "type": "group", "fields": [{"name": "child"}]}],
                r"fields\[0\]\.fields\[0\] is missing required keys: type",
            ),
        ],
    )
    def test_structure_errors(self, write_json, document, match):
        """Verify malformed definitions are reported with their location."""
        # Arrange
        path = write_json("form.json", document)

        # Act & Assert
        with pytest.raises(DefinitionError, match=match):
            load_definitions(path)

    def test_definition_error_is_load_error(self, write_json):
        """Verify callers can catch every file problem as LoadError."""
        # Arrange
        path = write_json("form.json", [{"type": "string"}])

        # Act & Assert
        with pytest.raises(LoadError):
            load_definitions(path)


class TestLoadFields:
    """Test suite for load_fields."""

    def test_builds_fields(self, write_yaml, registry):
        """Verify definitions are turned into fields, composites included."""
        # Arrange
        path = write_yaml(
            "form.yaml",
            {
                "fields": [
                    {"type": "email", "name": "email", "config": {"required": True}},
                    {"type": "group", "name": "address", "fields": [{"type": "string", "name": "city"}]},
                ]
            },
        )

        # Act
        fields = load_fields(path, registry)

        # Assert
        assert isinstance(fields[0], EmailField)
        assert isinstance(fields[1], GroupField)
        assert fields[1].field_names() == ["city"]


class TestLoadRecords:
    """Test suite for data record files."""

    def test_single_mapping(self, write_json):
        """Verify one mapping is one record."""
        # Arrange
        path = write_json("data.json", {"name": "Ada"})

        # Act & Assert
        assert load_records(path) == [{"name": "Ada"}]

    def test_list_of_mappings(self, write_yaml):
        """Verify lists of mappings are read in order."""
        # Arrange
        path = write_yaml("data.yaml", [{"name": "Ada"}, {"name": "Bob"}])

        # Act & Assert
        assert load_records(path) == [{"name": "Ada"}, {"name": "Bob"}]

    @pytest.mark.parametrize("document", [[1, 2], "text", [{"a": 1}, "b"]])
    def test_rejects_other_shapes(self, write_json, document):
        """Verify anything else is a definition error."""
        # Arrange
        path = write_json("data.json", document)

        # Act & Assert
        with pytest.raises(DefinitionError, match="mapping or a list of mappings"):
            load_records(path)
