"""
JSON Schema validation utility for key template files.
Path: keyfmt/utils/schema_validation.py
"""

from typing import Dict, Any, List, Union, Optional
import json
import os
from pathlib import Path
from jsonschema import validate, ValidationError, Draft7Validator
import structlog

logger = structlog.get_logger()

DEFAULT_KEYS_SCHEMA = Path(os.path.dirname(os.path.abspath(__file__))).parent / "schemas" / "keys_v1.json"


class SchemaValidator:
    """
    Utility class for validating key template trees against JSON schemas.
    """

    _schema_cache: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def _load_schema(cls, schema_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a JSON schema from file with caching support.

        Args:
            schema_path: Path to the JSON schema file

        Returns:
            Loaded schema as a dictionary, empty if it could not be read
        """
        schema_path_str = str(schema_path)

        if schema_path_str in cls._schema_cache:
            return cls._schema_cache[schema_path_str]

        try:
            with open(schema_path, 'r') as f:
                schema = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("schema.load_failed",
                        schema_path=schema_path_str,
                        error=str(e))
            return {}

        cls._schema_cache[schema_path_str] = schema
        return schema

    @classmethod
    def validate_keys(cls,
                      keys: Dict[str, Any],
                      schema_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Validate a section -> key tree mapping against the keys schema.

        Args:
            keys: The loaded key templates
            schema_path: Optional custom schema path (defaults to the bundled schema)

        Returns:
            The keys mapping unchanged when valid

        Raises:
            ValidationError: If the mapping does not match the schema
        """
        schema_path = schema_path or DEFAULT_KEYS_SCHEMA
        schema = cls._load_schema(schema_path)
        if not schema:
            logger.warning("schema.validation_skipped",
                          reason="schema_not_loaded",
                          schema_path=str(schema_path))
            return keys

        try:
            validate(instance=keys, schema=schema, cls=Draft7Validator)
        except ValidationError as e:
            logger.error("schema.validation_failed",
                        schema_type="keys",
                        error=e.message,
                        path=list(e.path))
            raise

        logger.debug("schema.validation_passed",
                    schema_type="keys",
                    sections=len(keys))
        return keys

    @classmethod
    def get_validation_errors(cls,
                              instance: Dict[str, Any],
                              schema_path: Optional[Union[str, Path]] = None) -> List[Dict[str, Any]]:
        """
        Validate an instance against a schema and return a list of validation errors.

        Args:
            instance: The instance to validate
            schema_path: Path to the schema file (defaults to the bundled keys schema)

        Returns:
            List of validation errors (empty if valid)
        """
        schema_path = schema_path or DEFAULT_KEYS_SCHEMA
        schema = cls._load_schema(schema_path)
        if not schema:
            return [{"message": "Failed to load schema", "path": [], "schema_path": []}]

        validator = Draft7Validator(schema)
        errors = []

        for error in validator.iter_errors(instance):
            errors.append({
                "message": error.message,
                "path": list(error.path) if error.path else [],
                "schema_path": list(error.schema_path) if error.schema_path else []
            })

        return errors
