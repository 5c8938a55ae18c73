"""Formatter registry — maps (renderer, format) pairs to formatter classes.

Registrations happen while formatter modules are imported and are read
when a renderer looks up its formatter. There is no removal operation.

A process-wide default is available via get_formatter_registry(); tests
and embedding applications can build their own FormatterRegistry and
inject it into Formatter.renders() and Renderer.render().
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from .exceptions import UnknownFormatError

logger = logging.getLogger(__name__)


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class FormatterRegistry:
    """Registry of formatter classes keyed by renderer class and format."""

    def __init__(self):
        self._handlers: Dict[type, Dict[str, type]] = {}
        self._formats: Dict[type, List[str]] = {}

    def register(
        self,
        formatter_class: type,
        formats: Union[str, Iterable[str]],
        renderer_classes: Union[type, Iterable[type]],
    ) -> None:
        """Register a formatter class for every (format, renderer) pair.

        Args:
            formatter_class: Formatter class handling the formats
            formats: One format identifier or several
            renderer_classes: One renderer class or several
        """
        renderers = _as_list(renderer_classes)
        for fmt in _as_list(formats):
            for renderer in renderers:
                self._handlers.setdefault(renderer, {})[fmt] = formatter_class
                supported = self._formats.setdefault(formatter_class, [])
                if fmt not in supported:
                    supported.append(fmt)
                logger.debug(
                    f"Registered {formatter_class.__name__} for "
                    f"{getattr(renderer, '__name__', renderer)}:{fmt}"
                )

    def formats_for(self, formatter_class: type) -> List[str]:
        """Return the formats a formatter class has been registered under."""
        return list(self._formats.get(formatter_class, []))

    def formatter_for(self, renderer_class: type, format: str) -> type:
        """Find the formatter class for a renderer and format.

        The renderer's base classes are searched too, so a renderer
        subclass picks up its parent's formatters.

        Raises:
            UnknownFormatError: If nothing is registered for the pair
        """
        for klass in getattr(renderer_class, "__mro__", (renderer_class,)):
            handlers = self._handlers.get(klass)
            if handlers and format in handlers:
                return handlers[format]
        raise UnknownFormatError(getattr(renderer_class, "__name__", str(renderer_class)), format)

    def renderer_formats(self, renderer_class: type) -> Dict[str, type]:
        """Return the format → formatter mapping for a renderer class."""
        merged: Dict[str, type] = {}
        for klass in reversed(getattr(renderer_class, "__mro__", (renderer_class,))):
            merged.update(self._handlers.get(klass, {}))
        return merged

    def renderers(self) -> List[type]:
        """Return every renderer class that has at least one registration."""
        return list(self._handlers)


_registry: Optional[FormatterRegistry] = None


def get_formatter_registry() -> FormatterRegistry:
    """Return the process-wide default registry, creating it on first use."""
    global _registry
    if _registry is None:
        _registry = FormatterRegistry()
    return _registry
