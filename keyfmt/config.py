"""
Template store backed by nested configuration with dotted path access.
Path: keyfmt/config.py
"""
import yaml
from typing import Dict, Any, Optional, List, Iterator, Tuple, Union
from pathlib import Path
import structlog
from copy import deepcopy
import collections.abc

logger = structlog.get_logger()


def get_by_path(data: Dict[str, Any], path: List[str]) -> Any:
    """
    Access dictionary data using a path list.

    Args:
        data: Dictionary to traverse
        path: List of keys forming the path

    Returns:
        Value at path or None if not found
    """
    current = data
    for key in path:
        if not isinstance(current, collections.abc.Mapping) or key not in current:
            return None
        current = current[key]
    return current


def get_value(data: Dict[str, Any], path_str: str) -> Any:
    """
    Access dictionary data using a dotted path string (e.g. "cache.product.book").

    Returns:
        Value at the specified path or None if not found.
    """
    return get_by_path(data, path_str.split('.'))


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], _path: str = "") -> Dict[str, Any]:
    """
    Deep merge dictionaries preserving hierarchical structure.
    Rules:
    1. Override values take precedence.
    2. Dictionaries merged recursively.
    3. None values in override delete keys from base.

    Args:
        base: Base configuration dictionary
        override: Override configuration dictionary
        _path: Internal path tracking for logging

    Returns:
        Merged configuration dictionary
    """
    result = deepcopy(base)
    current_path_prefix = f"{_path}." if _path else ""

    for key, value in override.items():
        current_key_path = f"{current_path_prefix}{key}"
        if value is None:
            if key in result:
                logger.debug("config.deep_merge.delete", key_path=current_key_path)
                result.pop(key, None)
            continue

        if key in result and isinstance(result.get(key), collections.abc.Mapping) and isinstance(value, collections.abc.Mapping):
            result[key] = deep_merge(result[key], value, _path=current_key_path)
        else:
            if key in result and result.get(key) != value:
                logger.debug("config.deep_merge.override", key_path=current_key_path, old_value=result.get(key), new_value=value)
            result[key] = deepcopy(value)

    return result


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load a key template file from YAML.

    A missing file yields an empty config. Invalid YAML, or a document whose
    top level is not a mapping, raises ValueError.
    """
    path = Path(path)
    logger.info("config.load.starting", path=str(path))
    if not path.exists():
        logger.error("config.load.file_not_found", path=str(path))
        return {}
    try:
        with open(path) as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error("config.load.yaml_error", path=str(path), error=str(e))
        raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(config, dict):
        logger.error("config.load.not_a_mapping", path=str(path), found_type=type(config).__name__)
        raise ValueError(f"Config file {path} must contain a mapping of sections")

    logger.info("config.load.success", path=str(path), sections=list(config.keys()))
    return config


class TemplateStore:
    """
    Read access to key templates stored as section -> nested dotted keys.

    The data maps each section name to a tree whose leaves are template
    strings, so the template for ("cache", "product.book") lives at
    data["cache"]["product"]["book"]. A literal dotted entry
    (data["cache"]["product.book"]) is found as well.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = data if data is not None else {}

    @classmethod
    def from_yaml(cls, *paths: Union[str, Path], validate: bool = True) -> 'TemplateStore':
        """
        Build a store from one or more YAML files, later files overriding earlier ones.

        Args:
            paths: YAML files holding section -> key tree mappings
            validate: If True, check the merged tree against the keys schema

        Raises:
            ValueError: If a file holds invalid YAML
            jsonschema.ValidationError: If validation is enabled and fails
        """
        merged: Dict[str, Any] = {}
        for path in paths:
            merged = deep_merge(merged, load_config(Path(path)))

        if validate:
            from keyfmt.utils.schema_validation import SchemaValidator
            SchemaValidator.validate_keys(merged)

        logger.info("config.store.loaded", files=len(paths), sections=list(merged.keys()))
        return cls(merged)

    def lookup_template(self, section: str, key: str) -> Optional[str]:
        """
        Return the template registered for section.key, or None when absent.

        A non-string value at the path (a sub-tree or a scalar) counts as
        absent.
        """
        value = get_by_path(self.data, [section] + key.split('.'))
        if not isinstance(value, str):
            flat = get_by_path(self.data, [section, key])
            if flat is not None:
                value = flat
        if value is None:
            return None

        if not isinstance(value, str):
            logger.warning("config.template_not_a_string",
                          section=section,
                          key=key,
                          value_type=type(value).__name__)
            return None
        return value

    def set(self, path: str, template: str) -> None:
        """Register a template at a dotted path such as "cache.product.book"."""
        parts = path.split('.')
        if len(parts) < 2:
            raise ValueError(f"Template path '{path}' must include a section and a key")

        current = self.data
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = template
        logger.debug("config.template_set", path=path)

    def sections(self) -> List[str]:
        """Names of every section holding at least one entry."""
        return [name for name, value in self.data.items() if isinstance(value, collections.abc.Mapping)]

    def templates(self, section: str) -> Iterator[Tuple[str, str]]:
        """Yield (dotted_key, template) pairs for a section, depth first."""

        def _walk(node: Any, prefix: List[str]) -> Iterator[Tuple[str, str]]:
            if isinstance(node, str):
                yield '.'.join(prefix), node
            elif isinstance(node, collections.abc.Mapping):
                for name, child in node.items():
                    yield from _walk(child, prefix + [str(name)])

        node = self.data.get(section)
        if isinstance(node, collections.abc.Mapping):
            yield from _walk(node, [])
