"""Loading field definitions and data records from YAML or JSON files."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fieldkit.exceptions import DefinitionError, LoadError
from fieldkit.factory import create_fields
from fieldkit.fields import BaseField
from fieldkit.registry import FieldRegistry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


class FileReader:
    """Simple file reading abstraction with format detection."""

    @staticmethod
    def read_file(file_path: str | Path) -> Any:
        """
        Read and parse file content based on extension.

        Returns:
            Parsed file content

        Raises:
            LoadError: For missing files, unsupported formats, I/O or parse errors
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise LoadError(f"File not found: {file_path}", str(file_path))

        suffix = file_path.suffix.lower()
        if suffix not in YAML_SUFFIXES and suffix != ".json":
            raise LoadError(f"Unsupported file format: {file_path.suffix}", str(file_path))

        try:
            with open(file_path, encoding="utf-8") as f:
                if suffix in YAML_SUFFIXES:
                    try:
                        return FileReader._parse_yaml(f)
                    except YAMLError as e:
                        raise LoadError(f"Error parsing YAML in {file_path}: {e}", str(file_path)) from e
                try:
                    return FileReader._parse_json(f)
                except json.JSONDecodeError as e:
                    raise LoadError(f"Error parsing JSON in {file_path}: {e}", str(file_path)) from e
        except PermissionError as e:
            raise LoadError(f"Permission denied reading {file_path}", str(file_path)) from e
        except UnicodeDecodeError as e:
            raise LoadError(f"Encoding error reading {file_path}: {e}", str(file_path)) from e

    @staticmethod
    def _parse_yaml(file_handle) -> Any:
        yaml = YAML(typ="safe", pure=True)
        return yaml.load(file_handle)

    @staticmethod
    def _parse_json(file_handle) -> Any:
        return json.load(file_handle)


def _check_definitions(definitions: Any, file_path: str, where: str = "fields") -> None:
    if not isinstance(definitions, list):
        raise DefinitionError(f"'{where}' must be a list of field definitions", file_path)
    for index, definition in enumerate(definitions):
        location = f"{where}[{index}]"
        if not isinstance(definition, Mapping):
            raise DefinitionError(f"{location} must be a mapping", file_path)
        missing = [key for key in ("type", "name") if not definition.get(key)]
        if missing:
            raise DefinitionError(
                f"{location} is missing required keys: {', '.join(missing)}",
                file_path,
                context={"definition": dict(definition)},
            )
        if definition.get("config") is not None and not isinstance(definition["config"], Mapping):
            raise DefinitionError(f"{location}.config must be a mapping", file_path)
        if "fields" in definition:
            _check_definitions(definition["fields"], file_path, f"{location}.fields")


def load_definitions(file_path: str | Path) -> list[dict[str, Any]]:
    """
    Read field definitions from a YAML or JSON file.

    The document is either a list of definitions or a mapping with a
    ``fields`` list.

    Raises:
        LoadError: If the file cannot be read or parsed
        DefinitionError: If the document does not hold valid definitions
    """
    data = FileReader.read_file(file_path)
    if isinstance(data, Mapping):
        if "fields" not in data:
            raise DefinitionError("Mapping documents must contain a 'fields' key", str(file_path))
        data = data["fields"]
    _check_definitions(data, str(file_path))
    logger.info(f"Loaded {len(data)} field definition(s) from {file_path}")
    return data


def load_fields(file_path: str | Path, registry: FieldRegistry | None = None) -> list[BaseField]:
    """Read a definition file and build its fields."""
    return create_fields(load_definitions(file_path), registry)


def load_records(file_path: str | Path) -> list[dict[str, Any]]:
    """
    Read data records from a YAML or JSON file.

    A single mapping is treated as one record.

    Raises:
        LoadError: If the file cannot be read or does not hold records
    """
    data = FileReader.read_file(file_path)
    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(record, Mapping) for record in data):
        raise DefinitionError("Data files must contain a mapping or a list of mappings", str(file_path))
    logger.info(f"Loaded {len(data)} record(s) from {file_path}")
    return [dict(record) for record in data]
