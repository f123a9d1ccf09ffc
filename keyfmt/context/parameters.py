"""
Normalization of call-time arguments into one of two resolution modes.

A key can be requested with no parameters, with positional values, with
keyword arguments, or with a single list/dict carrying either. All of these
collapse to a ResolvedParameters instance in POSITIONAL or NAMED mode before
any template is consulted.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union


class ResolutionMode(str, Enum):
    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class ResolvedParameters:
    """Immutable parameter set produced by normalize_parameters."""
    mode: ResolutionMode
    values: Union[Tuple[Any, ...], Mapping[str, Any]]

    @classmethod
    def positional(cls, values) -> 'ResolvedParameters':
        return cls(ResolutionMode.POSITIONAL, tuple(values))

    @classmethod
    def named(cls, values: Mapping[Any, Any]) -> 'ResolvedParameters':
        """
        Build NAMED parameters, stringifying every key.

        Raises:
            ValueError: If two keys stringify to the same name, e.g. 0 and "0"
        """
        named: Dict[str, Any] = {}
        for key, value in values.items():
            name = str(key)
            if name in named:
                raise ValueError(f"Parameter '{name}' was given more than once")
            named[name] = value
        return cls(ResolutionMode.NAMED, MappingProxyType(named))

    def __len__(self) -> int:
        return len(self.values)


def _is_array_like(value: Any) -> bool:
    """Lists, tuples and mappings are spliced; strings stay scalars."""
    return isinstance(value, (Mapping, list, tuple))


def _entries(value: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return iter(value.items())
    return enumerate(value)


def flatten_parameters(args: Tuple[Any, ...], kwargs: Mapping[str, Any]) -> Dict[Any, Any]:
    """
    Flatten call arguments one level into an ordered key/value collection.

    Positional arguments are keyed by position and keyword arguments by
    name. A list, tuple or mapping argument is spliced in place. Integer keys
    are renumbered sequentially over the whole result; a repeated name
    overwrites the earlier value but keeps its position.

    Examples:
        >>> flatten_parameters(('abc', 'xyz'), {})
        {0: 'abc', 1: 'xyz'}
        >>> flatten_parameters(({'id': 1},), {})
        {'id': 1}
        >>> flatten_parameters(('abc', {'id': 1}), {})
        {0: 'abc', 'id': 1}
    """
    pairs: List[Tuple[Any, Any]] = list(enumerate(args)) + list(kwargs.items())

    flattened: Dict[Any, Any] = {}
    next_index = 0
    for key, value in pairs:
        entries = _entries(value) if _is_array_like(value) else [(key, value)]
        for entry_key, entry_value in entries:
            if isinstance(entry_key, int) and not isinstance(entry_key, bool):
                flattened[next_index] = entry_value
                next_index += 1
            else:
                flattened[entry_key] = entry_value
    return flattened


def normalize_parameters(*args, **kwargs) -> ResolvedParameters:
    """
    Normalize raw call arguments into a resolution mode and parameter set.

    Empty input is POSITIONAL with no values. After flattening, keys forming
    exactly the range 0..n-1 give POSITIONAL mode; anything else is NAMED,
    with surviving integer keys stringified.

    Examples:
        >>> normalize_parameters().mode
        <ResolutionMode.POSITIONAL: 'positional'>
        >>> normalize_parameters(123, 'test').values
        (123, 'test')
        >>> dict(normalize_parameters(id=123).values)
        {'id': 123}
    """
    if not args and not kwargs:
        return ResolvedParameters.positional(())

    flattened = flatten_parameters(args, kwargs)

    if list(flattened.keys()) == list(range(len(flattened))):
        return ResolvedParameters.positional(flattened.values())

    return ResolvedParameters.named(flattened)
