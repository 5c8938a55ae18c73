"""Renderer base class — drives a formatter through its build stages."""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..options import Options
from ..registry import FormatterRegistry, get_formatter_registry

logger = logging.getLogger(__name__)


class Renderer:
    """Select a formatter for a format and run its stages in order.

    Subclasses list their stage names in ``stages``. A formatter registered
    for the renderer implements whichever of those stages it needs; stages
    the formatter does not implement are skipped.

    Attributes:
        format: Format being rendered
        formatter: Formatter instance doing the work
        options: Options shared with the formatter
    """

    stages: Tuple[str, ...] = ()
    registry: Optional[FormatterRegistry] = None

    def __init__(self, format: str, formatter, options: Options):
        self.format = format
        self.formatter = formatter
        self.options = options

    @property
    def data(self) -> Any:
        return self.formatter.data

    @data.setter
    def data(self, value: Any) -> None:
        self.formatter.data = value
        self.options.data = value

    @classmethod
    def _registry(cls, registry: Optional[FormatterRegistry] = None) -> FormatterRegistry:
        return registry or cls.registry or get_formatter_registry()

    @classmethod
    def formats(cls, registry: Optional[FormatterRegistry] = None) -> List[str]:
        """Return the formats registered for this renderer."""
        return list(cls._registry(registry).renderer_formats(cls))

    @classmethod
    def formatter_for(cls, format: str, registry: Optional[FormatterRegistry] = None) -> type:
        """Return the formatter class registered for format.

        Raises:
            UnknownFormatError: If no formatter handles the format
        """
        return cls._registry(registry).formatter_for(cls, format)

    @classmethod
    def render(
        cls,
        format: str,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[Callable[["Renderer"], Any]] = None,
        registry: Optional[FormatterRegistry] = None,
        **kwargs
    ):
        """Render data in the given format.

            TableRenderer.render("csv", data=table)
            TableRenderer.render("text", {"data": table, "title": "Sales"})

        Args:
            format: Format identifier
            options: Option mapping (data, io, template, ...)
            callback: Called with the renderer before any stage runs
            registry: Registry to resolve the formatter in
            **kwargs: Extra options, overriding those in options

        Returns:
            The formatter's accumulated output
        """
        registry = cls._registry(registry)

        opts = Options(options)
        opts.update(kwargs)

        formatter_class = registry.formatter_for(cls, format)
        formatter = formatter_class(registry=registry)
        formatter.format = format
        formatter.data = opts.data
        formatter.options = opts

        renderer = cls(format, formatter, opts)
        logger.debug(f"Rendering {cls.__name__} as {format} with {formatter_class.__name__}")

        if callback is not None:
            callback(renderer)

        renderer.run()
        return formatter.output_value()

    def setup(self) -> None:
        """Hook run before the first stage."""
        pass

    def finalize(self) -> None:
        """Hook run after the last stage."""
        pass

    def run(self) -> None:
        """Apply the template, then run setup, every stage, and finalize."""
        self.formatter.apply_template()
        self.setup()
        for name in self.stages:
            self.formatter.run_stage(name, missing_ok=True)
        self.finalize()
