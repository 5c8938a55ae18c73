#!/usr/bin/env python3
"""
Tests for the tabular data models and file loaders.
"""
import json
import os
import shutil
import tempfile
import unittest

from reportkit.data import Group, Grouping, Row, Table, load_table
from reportkit.exceptions import DataLoadError


class TableTests(unittest.TestCase):
    """Test cases for Row, Table and Grouping"""

    def test_from_records_column_order(self):
        """Test columns follow first-seen key order and missing keys become None"""
        table = Table.from_records([{"a": 1, "b": 2}, {"c": 3, "a": 4}])

        self.assertEqual(table.column_names, ["a", "b", "c"])
        self.assertEqual(list(table[1]), [4, None, 3])

    def test_from_records_with_columns(self):
        """Test an explicit column list selects and orders columns"""
        table = Table.from_records([{"a": 1, "b": 2}], column_names=["b"])

        self.assertEqual(table.to_records(), [{"b": 2}])

    def test_row_access(self):
        """Test rows are indexable by position and column name"""
        row = Row(["alice", 10], ["name", "amount"])

        self.assertEqual(row[0], "alice")
        self.assertEqual(row["amount"], 10)
        self.assertEqual(row.to_dict(), {"name": "alice", "amount": 10})
        self.assertEqual(len(row), 2)

    def test_group_by(self):
        """Test grouping keeps first-seen order and drops the grouped column"""
        table = Table.from_records([
            {"region": "west", "v": 1},
            {"region": "east", "v": 2},
            {"region": "west", "v": 3},
        ])

        grouping = table.group_by("region")

        self.assertIsInstance(grouping, Grouping)
        self.assertEqual(grouping.grouped_by, "region")
        self.assertEqual(list(grouping), ["west", "east"])
        west = grouping["west"]
        self.assertIsInstance(west, Group)
        self.assertEqual(west.name, "west")
        self.assertEqual(west.column_names, ["v"])
        self.assertEqual(west.to_records(), [{"v": 1}, {"v": 3}])
        self.assertEqual([name for name, _ in grouping.items()], ["west", "east"])

    def test_group_by_unknown_column(self):
        """Test grouping on a missing column raises KeyError"""
        with self.assertRaises(KeyError):
            Table.from_records([{"a": 1}]).group_by("b")


class LoadTableTests(unittest.TestCase):
    """Test cases for load_table"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write(self, name, content):
        path = os.path.join(self.temp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load_json(self):
        """Test loading a JSON list of objects"""
        path = self.write("data.json", json.dumps([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]))

        table = load_table(path)

        self.assertEqual(table.column_names, ["a", "b"])
        self.assertEqual(table.to_records(), [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}])

    def test_load_csv(self):
        """Test loading a CSV file with a header row"""
        path = self.write("data.csv", "a,b\n1,x\n2,y\n")

        table = load_table(path, column_names=["b"])

        self.assertEqual(table.to_records(), [{"b": "x"}, {"b": "y"}])

    def test_unknown_column(self):
        """Test selecting a column the file does not have"""
        path = self.write("data.csv", "a,b\n1,x\n")

        with self.assertRaises(DataLoadError):
            load_table(path, column_names=["c"])

    def test_invalid_json(self):
        """Test malformed JSON raises DataLoadError"""
        path = self.write("bad.json", "{not json")

        with self.assertRaises(DataLoadError):
            load_table(path)

    def test_json_must_be_list_of_objects(self):
        """Test a JSON object at top level is rejected"""
        path = self.write("obj.json", json.dumps({"a": 1}))

        with self.assertRaises(DataLoadError):
            load_table(path)

    def test_unsupported_suffix(self):
        """Test unknown file types are rejected"""
        path = self.write("data.xml", "<rows/>")

        with self.assertRaises(DataLoadError):
            load_table(path)

    def test_non_utf8_file(self):
        """Test that undecodable bytes raise DataLoadError for CSV and JSON"""
        for name in ("latin1.csv", "latin1.json"):
            path = os.path.join(self.temp_dir, name)
            with open(path, "wb") as f:
                f.write(b"name\ncaf\xe9\n")

            with self.assertRaises(DataLoadError):
                load_table(path)

    def test_missing_file(self):
        """Test a missing file raises DataLoadError"""
        with self.assertRaises(DataLoadError):
            load_table(os.path.join(self.temp_dir, "missing.json"))


if __name__ == "__main__":
    unittest.main()
