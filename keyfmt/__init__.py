"""
Parameterized key formatting.

Templates such as "product-book:{id}" are registered per section and dotted
key; callers ask for a section/key with positional, named or array
parameters and get the formatted string back.

Usage:
    from keyfmt import Key, TemplateStore

    keys = Key(TemplateStore({"cache": {"product": {"book": "product-book:{id}"}}}))
    keys.cache("product.book", id=123)      # 'product-book:123'
    keys.cache("product.book", 123)         # 'product-book:123'
    keys.resolve("custom", "dynamic", {"value": "test"})
"""

from keyfmt.config import TemplateStore, load_config, deep_merge
from keyfmt.context import (
    ResolutionMode,
    ResolvedParameters,
    TemplateResolver,
    extract_placeholders,
    normalize_parameters,
    required_placeholders,
)
from keyfmt.errors import (
    KeyResolutionError,
    MissingTemplateError,
    MissingParametersError,
    ExtraParametersError,
    CountMismatchError,
)
from keyfmt.keys import Key, Section
from keyfmt.resolver import KeyResolver

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Key",
    "Section",
    "KeyResolver",
    # Store
    "TemplateStore",
    "load_config",
    "deep_merge",
    # Parameters and templates
    "ResolutionMode",
    "ResolvedParameters",
    "normalize_parameters",
    "TemplateResolver",
    "extract_placeholders",
    "required_placeholders",
    # Exceptions
    "KeyResolutionError",
    "MissingTemplateError",
    "MissingParametersError",
    "ExtraParametersError",
    "CountMismatchError",
]
