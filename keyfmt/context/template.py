"""
Placeholder extraction and substitution for key templates.

A template is a plain string with zero or more `{name}` placeholders. The
name is the literal text between an opening brace and the next closing
brace; there is no escaping. An unmatched `{` (or an empty `{}`) is kept as
a literal character.
"""

import re
from typing import Any, List, Mapping, Pattern, Sequence


class TemplateResolver:
    """Extracts and substitutes `{name}` placeholders in key templates."""

    # Placeholder pattern: {name}
    _PLACEHOLDER_PATTERN: Pattern = re.compile(r'{([^}]+)}')

    @staticmethod
    def extract(template: str) -> List[str]:
        """
        Return every placeholder name in order of occurrence, repeats included.

        Examples:
            >>> TemplateResolver.extract('{id}:{type}:{id}')
            ['id', 'type', 'id']
            >>> TemplateResolver.extract('open { brace')
            []
        """
        return TemplateResolver._PLACEHOLDER_PATTERN.findall(template)

    @staticmethod
    def required(template: str) -> List[str]:
        """Distinct placeholder names in order of first appearance."""
        return list(dict.fromkeys(TemplateResolver.extract(template)))

    @staticmethod
    def substitute_named(template: str, params: Mapping[str, Any]) -> str:
        """
        Replace each placeholder with the value registered under its name.

        Every occurrence of a repeated name receives the same value. The
        caller must have checked that all names are present.
        """
        return TemplateResolver._PLACEHOLDER_PATTERN.sub(
            lambda match: str(params[match.group(1)]),
            template
        )

    @staticmethod
    def substitute_positional(template: str, values: Sequence[Any]) -> str:
        """
        Replace placeholders left to right, consuming one value per occurrence.

        Names are ignored; the caller must supply exactly one value per
        occurrence.
        """
        remaining = iter(values)
        return TemplateResolver._PLACEHOLDER_PATTERN.sub(
            lambda match: str(next(remaining)),
            template
        )


def extract_placeholders(template: str) -> List[str]:
    """Module-level shortcut for TemplateResolver.extract."""
    return TemplateResolver.extract(template)


def required_placeholders(template: str) -> List[str]:
    """Module-level shortcut for TemplateResolver.required."""
    return TemplateResolver.required(template)
