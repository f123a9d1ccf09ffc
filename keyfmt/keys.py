"""
Public facade: one resolver method per known section.
Path: keyfmt/keys.py
"""

from enum import Enum
from pathlib import Path
from typing import Union

from keyfmt.config import TemplateStore
from keyfmt.resolver import KeyResolver


class Section(str, Enum):
    """Section names with a dedicated method on Key."""
    CACHE = "cache"
    QUEUE = "queue"
    EVENT = "event"
    TAG = "tag"
    LOCK = "lock"
    CHANNEL = "channel"
    BROADCAST = "broadcast"
    LIMIT = "limit"
    SESSION = "session"
    JOB = "job"
    MIDDLEWARE = "middleware"
    ROUTE = "route"
    VIEW = "view"
    TRANSLATION = "translation"
    COMMAND = "command"
    CONTAINER = "container"
    FEATURE = "feature"
    NOTIFICATION = "notification"
    THROTTLE = "throttle"
    DISK = "disk"
    POLICY = "policy"
    GUARD = "guard"
    SCHEDULE = "schedule"
    TENANT = "tenant"
    EXPERIMENT = "experiment"
    TEST = "test"
    MAIL = "mail"
    SERVICE = "service"
    FLASH = "flash"
    ALIAS = "alias"
    PROVIDER = "provider"
    RAW = "raw"
    CONFIG = "config"


class Key:
    """
    Formatted key lookup over an injected template store.

    Every Section has a method of the same name:

        >>> store = TemplateStore({"cache": {"product": {"book": "product-book:{id}"}}})
        >>> keys = Key(store)
        >>> keys.cache("product.book", id=123)
        'product-book:123'
        >>> keys.cache("product.book", 123)
        'product-book:123'

    Sections outside the fixed list go through resolve():

        >>> keys.resolve("custom", "dynamic", value="test")  # doctest: +SKIP
        'custom:test'
    """

    def __init__(self, store):
        self.store = store
        self._resolver = KeyResolver(store)

    @classmethod
    def from_yaml(cls, *paths: Union[str, Path], validate: bool = True) -> 'Key':
        """Create a Key over templates loaded from layered YAML files."""
        return cls(TemplateStore.from_yaml(*paths, validate=validate))

    def resolve(self, section: str, key: str, /, *args, **kwargs) -> str:
        """Resolve a key from an arbitrary section."""
        if isinstance(section, Section):
            section = section.value
        return self._resolver.resolve(section, key, *args, **kwargs)


def _section_method(section: Section):
    def method(self, key: str, /, *args, **kwargs) -> str:
        return self._resolver.resolve(section.value, key, *args, **kwargs)

    method.__name__ = section.value
    method.__qualname__ = f"Key.{section.value}"
    method.__doc__ = f"Resolve a key from the '{section.value}' section."
    return method


for _section in Section:
    setattr(Key, _section.value, _section_method(_section))
del _section
