#!/usr/bin/env python3
"""
Tests for the nested rendering helpers available inside formatter stages.
"""
import io
import unittest

from reportkit.data import Row, Table
from reportkit.formatters import BinaryFormatter, Formatter, stage
from reportkit.registry import FormatterRegistry
from reportkit.renderers import GroupingRenderer, GroupRenderer, RowRenderer, TableRenderer

ALL_RENDERERS = [RowRenderer, TableRenderer, GroupRenderer, GroupingRenderer]


class PlainRows(Formatter):

    @stage("row")
    def row(self):
        self.output.write(",".join(str(value) for value in self.data) + "\n")

    @stage("table_body")
    def table_body(self):
        self.render_data_by_row()

    @stage("group_header")
    def group_header(self):
        self.output.write(f"[{self.data.name}]\n")

    @stage("group_body")
    def group_body(self):
        self.render_data_by_row()

    @stage("grouping_body")
    def grouping_body(self):
        self.render_inline_grouping()


class PackedRows(BinaryFormatter):

    @stage("row")
    def row(self):
        self.output.write(b"<" + ",".join(str(value) for value in self.data).encode() + b">")

    @stage("table_body")
    def table_body(self):
        parts = [self.render_row(row) for row in self.data]
        self.output.write(b"|".join(parts))

    @stage("group_header")
    def group_header(self):
        self.output.write(f"[{self.data.name}]".encode())

    @stage("group_body")
    def group_body(self):
        self.output.write(b"".join(self.render_data_by_row()))

    @stage("grouping_body")
    def grouping_body(self):
        self.output.write(b"".join(self.render_inline_grouping()))


def sample_table():
    return Table.from_records([
        {"region": "east", "value": 1},
        {"region": "west", "value": 2},
        {"region": "east", "value": 3},
    ])


class RenderingToolsTests(unittest.TestCase):
    """Test cases for render_row, render_table and friends"""

    def setUp(self):
        self.registry = FormatterRegistry()
        PlainRows.renders("plain", for_=ALL_RENDERERS, registry=self.registry)
        PackedRows.renders("packed", for_=ALL_RENDERERS, registry=self.registry)

    def make_formatter(self, klass=PlainRows, fmt="plain"):
        formatter = klass(registry=self.registry)
        formatter.format = fmt
        return formatter

    def test_render_data_by_row(self):
        """Test that every row is rendered in order into the same output"""
        result = TableRenderer.render("plain", data=sample_table(), registry=self.registry)
        self.assertEqual(result, "east,1\nwest,2\neast,3\n")

    def test_render_row_writes_to_current_output(self):
        """Test that nested output lands in the calling formatter's sink"""
        formatter = self.make_formatter()
        formatter.output.write("before\n")

        formatter.render_row(Row(["a", "b"]))

        self.assertEqual(formatter.output_value(), "before\na,b\n")

    def test_render_table(self):
        """Test render_table delegates to TableRenderer"""
        formatter = self.make_formatter()

        formatter.render_table(sample_table())

        self.assertEqual(formatter.output_value(), "east,1\nwest,2\neast,3\n")

    def test_render_group_and_grouping(self):
        """Test render_group and render_grouping delegate to their renderers"""
        grouping = sample_table().group_by("region")
        formatter = self.make_formatter()

        formatter.render_group(grouping["west"])
        formatter.render_grouping(grouping)

        self.assertEqual(
            formatter.output_value(),
            "[west]\n2\n" + "[east]\n1\n3\n\n[west]\n2\n\n"
        )

    def test_render_inline_grouping(self):
        """Test that each group is followed by a newline, in mapping order"""
        grouping = sample_table().group_by("region")

        result = GroupingRenderer.render("plain", data=grouping, registry=self.registry)

        self.assertEqual(result, "[east]\n1\n3\n\n[west]\n2\n\n")

    def test_caller_options_override_defaults(self):
        """Test that an explicit io option wins over the current output"""
        other = io.StringIO()
        formatter = self.make_formatter()

        formatter.render_row(["x"], {"io": other})

        self.assertEqual(other.getvalue(), "x\n")
        self.assertEqual(formatter.output_value(), "")

    def test_callback_receives_nested_renderer(self):
        """Test the callback sees the nested renderer with default options"""
        seen = []
        formatter = self.make_formatter()

        formatter.render_row(["x"], callback=seen.append)

        self.assertEqual(len(seen), 1)
        renderer = seen[0]
        self.assertIsInstance(renderer, RowRenderer)
        self.assertEqual(renderer.format, "plain")
        self.assertIs(renderer.options.layout, False)
        self.assertIs(renderer.options.io, formatter.output)
        self.assertEqual(renderer.data, ["x"])

    def test_callback_can_customize_before_stages(self):
        """Test that changes made in the callback affect the nested render"""
        formatter = self.make_formatter()

        def swap_data(renderer):
            renderer.data = ["swapped"]

        formatter.render_row(["original"], callback=swap_data)

        self.assertEqual(formatter.output_value(), "swapped\n")

    def test_binary_formatter_isolates_nested_output(self):
        """Test that binary formatters capture nested renders separately"""
        formatter = self.make_formatter(PackedRows, "packed")

        nested = formatter.render_row(["a", 1])

        self.assertEqual(nested, b"<a,1>")
        self.assertEqual(formatter.output_value(), b"")

    def test_binary_formatter_merges_nested_output(self):
        """Test that a binary formatter can merge the captured pieces itself"""
        table = Table.from_records([{"a": 1, "b": 2}, {"a": 3, "b": 4}])

        result = TableRenderer.render("packed", data=table, registry=self.registry)

        self.assertEqual(result, b"<1,2>|<3,4>")

    def test_binary_render_data_by_row_returns_rows(self):
        """Test that render_data_by_row hands back each row's bytes to a binary formatter"""
        formatter = self.make_formatter(PackedRows, "packed")
        formatter.data = Table.from_records([{"a": 1}, {"a": 2}])

        parts = formatter.render_data_by_row()

        self.assertEqual(parts, [b"<1>", b"<2>"])
        self.assertEqual(formatter.output_value(), b"")

    def test_binary_group_merges_rows(self):
        """Test that a binary group body can merge the rows it rendered"""
        grouping = sample_table().group_by("region")

        result = GroupRenderer.render("packed", data=grouping["east"], registry=self.registry)

        self.assertEqual(result, b"[east]<1><3>")

    def test_binary_inline_grouping_returns_groups(self):
        """Test that render_inline_grouping returns each group followed by a newline"""
        grouping = sample_table().group_by("region")

        result = GroupingRenderer.render("packed", data=grouping, registry=self.registry)

        self.assertEqual(result, b"[east]<1><3>\n[west]<2>\n")


if __name__ == "__main__":
    unittest.main()
