"""
Context module for key resolution.

This module contains the argument normalizer and the placeholder
extraction/substitution used by the resolver.
"""

from .parameters import ResolutionMode, ResolvedParameters, normalize_parameters
from .template import TemplateResolver, extract_placeholders, required_placeholders

__all__ = [
    'ResolutionMode',
    'ResolvedParameters',
    'normalize_parameters',
    'TemplateResolver',
    'extract_placeholders',
    'required_placeholders',
]
