"""Named formatting templates.

A template is a reusable bundle of option values. Formatters pick one by
name through ``options.template``; settings the caller already passed
explicitly are left alone.

    Template.create("compact", show_table_headers=False)
    Template.create("compact_titled", base="compact", title="Summary")
"""

import logging
from typing import Any, Dict, Optional

from ..exceptions import TemplateNotFoundError
from ..options import Options

logger = logging.getLogger(__name__)


class Template:
    """A named set of default option values."""

    _templates: Dict[str, "Template"] = {}

    def __init__(self, name: str, settings: Optional[Dict[str, Any]] = None):
        self.name = name
        self.settings: Dict[str, Any] = dict(settings or {})

    def __repr__(self) -> str:
        return f"Template({self.name!r}, {self.settings!r})"

    @classmethod
    def create(cls, name: str, base: Optional[str] = None, **settings) -> "Template":
        """Create and register a template.

        Args:
            name: Template name
            base: Name of a registered template to inherit settings from
            **settings: Option values, overriding the base's

        Returns:
            The registered Template

        Raises:
            TemplateNotFoundError: If base is given but not registered
        """
        merged = dict(cls.get(base).settings) if base else {}
        merged.update(settings)
        template = cls(name, merged)
        cls._templates[name] = template
        logger.debug(f"Registered template {name!r}")
        return template

    @classmethod
    def get(cls, name: str) -> "Template":
        """Look up a template by name.

        Raises:
            TemplateNotFoundError: If no template has that name
        """
        try:
            return cls._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    @classmethod
    def exists(cls, name: str) -> bool:
        return name in cls._templates

    @classmethod
    def clear(cls) -> None:
        """Forget every registered template."""
        cls._templates.clear()

    def apply(self, options: Options) -> None:
        """Copy settings into options for names the options leave unset."""
        for key, value in self.settings.items():
            if options.get(key) is None:
                options[key] = value
