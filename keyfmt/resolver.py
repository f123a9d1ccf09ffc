"""
Key resolution: template lookup, parameter validation and substitution.
Path: keyfmt/resolver.py
"""

from typing import Any, Callable, Mapping, Optional, Sequence, Union

import structlog

from keyfmt.context.parameters import ResolutionMode, normalize_parameters
from keyfmt.context.template import TemplateResolver
from keyfmt.errors import (
    CountMismatchError,
    ExtraParametersError,
    MissingParametersError,
    MissingTemplateError,
)

logger = structlog.get_logger()

TemplateLookup = Callable[[str, str], Optional[str]]


class KeyResolver:
    """
    Turns (section, key, parameters) into a formatted key string.

    The template source is injected: either an object exposing
    lookup_template(section, key) or a plain callable with that signature.
    The resolver keeps no state between calls.
    """

    def __init__(self, store: Union[TemplateLookup, Any]):
        lookup = getattr(store, "lookup_template", store)
        if not callable(lookup):
            raise TypeError("store must provide lookup_template(section, key) or be callable")
        self._lookup = lookup

    def _template(self, section: str, key: str) -> str:
        template = self._lookup(section, key)
        if template is None:
            raise MissingTemplateError(f"{section}.{key}")
        return template

    def resolve(self, section: str, key: str, /, *args, **kwargs) -> str:
        """
        Resolve a key from whatever argument shape the caller used.

        Examples:
            resolver.resolve("cache", "product.book", id=123)
            resolver.resolve("cache", "product.book", 123)
            resolver.resolve("cache", "product.book", {"id": 123})
        """
        parameters = normalize_parameters(*args, **kwargs)
        if parameters.mode is ResolutionMode.NAMED:
            return self.resolve_named(section, key, parameters.values)
        return self.resolve_positional(section, key, parameters.values)

    def resolve_named(self, section: str, key: str, params: Mapping[str, Any]) -> str:
        """
        Substitute placeholders by name.

        Missing names are reported before extra ones. Missing names follow
        template order, extra names follow the order they were supplied.

        Raises:
            MissingTemplateError, MissingParametersError, ExtraParametersError
        """
        path = f"{section}.{key}"
        template = self._template(section, key)
        required = TemplateResolver.required(template)

        missing = [name for name in required if name not in params]
        if missing:
            raise MissingParametersError(path, missing)

        required_set = set(required)
        extra = [name for name in params if name not in required_set]
        if extra:
            raise ExtraParametersError(path, extra)

        result = TemplateResolver.substitute_named(template, params)
        logger.debug("keys.resolve.named", path=path, parameters=len(params))
        return result

    def resolve_positional(self, section: str, key: str, values: Sequence[Any]) -> str:
        """
        Substitute placeholder occurrences left to right.

        Each occurrence consumes one value, so a name repeated three times
        needs three values.

        Raises:
            MissingTemplateError, CountMismatchError
        """
        path = f"{section}.{key}"
        template = self._template(section, key)

        expected = len(TemplateResolver.extract(template))
        if expected != len(values):
            raise CountMismatchError(path, expected, len(values))

        result = TemplateResolver.substitute_positional(template, values)
        logger.debug("keys.resolve.positional", path=path, parameters=len(values))
        return result
