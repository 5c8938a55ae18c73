#!/usr/bin/env python3
"""
Tests for formatter registration and lookup.
"""
import unittest

from reportkit.exceptions import UnknownFormatError
from reportkit.formatters import Formatter
from reportkit.registry import FormatterRegistry, get_formatter_registry
from reportkit.renderers import Renderer


class SummaryRenderer(Renderer):
    stages = ("summary",)


class DetailRenderer(Renderer):
    stages = ("detail",)


class ExtendedSummaryRenderer(SummaryRenderer):
    pass


class PlainFormatter(Formatter):
    pass


class FancyFormatter(Formatter):
    pass


class FormatterRegistryTests(unittest.TestCase):
    """Test cases for FormatterRegistry"""

    def setUp(self):
        self.registry = FormatterRegistry()

    def test_register_makes_formatter_discoverable(self):
        """Test that a registered formatter is found for its renderer and format"""
        PlainFormatter.renders("x", for_=SummaryRenderer, registry=self.registry)

        self.assertIs(self.registry.formatter_for(SummaryRenderer, "x"), PlainFormatter)
        self.assertIs(SummaryRenderer.formatter_for("x", registry=self.registry), PlainFormatter)

    def test_format_listed_once_when_registered_twice(self):
        """Test that repeated registration does not duplicate a format"""
        PlainFormatter.renders("x", for_=SummaryRenderer, registry=self.registry)
        PlainFormatter.renders("x", for_=SummaryRenderer, registry=self.registry)
        PlainFormatter.renders("x", for_=DetailRenderer, registry=self.registry)

        formats = PlainFormatter.formats(registry=self.registry)
        self.assertEqual(formats.count("x"), 1)
        self.assertEqual(formats, ["x"])

    def test_many_formats_many_renderers(self):
        """Test registering several formats against several renderers at once"""
        PlainFormatter.renders(["txt", "plain"], for_=[SummaryRenderer, DetailRenderer],
                               registry=self.registry)

        for renderer in (SummaryRenderer, DetailRenderer):
            for fmt in ("txt", "plain"):
                self.assertIs(self.registry.formatter_for(renderer, fmt), PlainFormatter)

        self.assertEqual(PlainFormatter.formats(registry=self.registry), ["txt", "plain"])

    def test_formats_are_per_formatter_class(self):
        """Test that each formatter class keeps its own format list"""
        PlainFormatter.renders("txt", for_=SummaryRenderer, registry=self.registry)
        FancyFormatter.renders("html", for_=SummaryRenderer, registry=self.registry)

        self.assertEqual(PlainFormatter.formats(registry=self.registry), ["txt"])
        self.assertEqual(FancyFormatter.formats(registry=self.registry), ["html"])
        self.assertEqual(SummaryRenderer.formats(registry=self.registry), ["txt", "html"])

    def test_last_registration_wins(self):
        """Test that re-registering a format replaces the handler"""
        PlainFormatter.renders("txt", for_=SummaryRenderer, registry=self.registry)
        FancyFormatter.renders("txt", for_=SummaryRenderer, registry=self.registry)

        self.assertIs(self.registry.formatter_for(SummaryRenderer, "txt"), FancyFormatter)

    def test_unknown_format_raises(self):
        """Test that an unregistered pair raises UnknownFormatError"""
        PlainFormatter.renders("txt", for_=SummaryRenderer, registry=self.registry)

        with self.assertRaises(UnknownFormatError):
            self.registry.formatter_for(SummaryRenderer, "pdf")
        with self.assertRaises(UnknownFormatError):
            self.registry.formatter_for(DetailRenderer, "txt")

    def test_renderer_subclass_inherits_formats(self):
        """Test that lookup falls back to a renderer's base classes"""
        PlainFormatter.renders("txt", for_=SummaryRenderer, registry=self.registry)

        self.assertIs(self.registry.formatter_for(ExtendedSummaryRenderer, "txt"), PlainFormatter)
        self.assertEqual(ExtendedSummaryRenderer.formats(registry=self.registry), ["txt"])

    def test_registries_are_isolated(self):
        """Test that an injected registry does not touch the default one"""
        PlainFormatter.renders("isolated", for_=DetailRenderer, registry=self.registry)

        self.assertNotIn("isolated", PlainFormatter.formats())
        with self.assertRaises(UnknownFormatError):
            get_formatter_registry().formatter_for(DetailRenderer, "isolated")

    def test_default_registry_is_singleton(self):
        """Test that get_formatter_registry always returns the same object"""
        self.assertIs(get_formatter_registry(), get_formatter_registry())


if __name__ == "__main__":
    unittest.main()
