"""Tabular data models rendered by reportkit."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass
class Row:
    """A single record of a table.

    Attributes:
        values: Cell values in column order
        column_names: Names of the columns the values belong to
    """

    values: List[Any]
    column_names: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, key: Union[int, str]) -> Any:
        """Return a cell by position or by column name."""
        if isinstance(key, str):
            return self.values[self.column_names.index(key)]
        return self.values[key]

    def to_dict(self) -> Dict[str, Any]:
        """Return the row as a column → value mapping."""
        return dict(zip(self.column_names, self.values))


@dataclass
class Table:
    """An ordered collection of rows sharing one set of columns.

    Attributes:
        column_names: Column names in display order
        rows: Table rows
    """

    column_names: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @classmethod
    def from_records(
        cls,
        records: List[Dict[str, Any]],
        column_names: Optional[List[str]] = None
    ) -> "Table":
        """Build a table from a list of dicts.

        Args:
            records: Row mappings
            column_names: Columns to keep (default: keys in first-seen order)

        Returns:
            New Table instance
        """
        if column_names is None:
            column_names = []
            for record in records:
                for key in record:
                    if key not in column_names:
                        column_names.append(key)

        rows = [
            Row([record.get(name) for name in column_names], list(column_names))
            for record in records
        ]
        return cls(column_names=list(column_names), rows=rows)

    def to_records(self) -> List[Dict[str, Any]]:
        """Return the rows as a list of dicts."""
        return [row.to_dict() for row in self.rows]

    def group_by(self, column: str) -> "Grouping":
        """Split the table into groups keyed by a column's values.

        Groups keep first-seen order and drop the grouped column.
        """
        if column not in self.column_names:
            raise KeyError(column)

        remaining = [name for name in self.column_names if name != column]
        groups: Dict[str, Group] = {}
        for row in self.rows:
            key = str(row[column])
            if key not in groups:
                groups[key] = Group(column_names=list(remaining), name=key)
            groups[key].rows.append(Row([row[name] for name in remaining], list(remaining)))

        return Grouping(groups=groups, grouped_by=column)


@dataclass
class Group(Table):
    """A named table, usually one slice of a Grouping.

    Attributes:
        name: Group name
    """

    name: str = ""


@dataclass
class Grouping:
    """Ordered mapping of group name to Group.

    Attributes:
        groups: Groups keyed by name
        grouped_by: Column the groups were split on
    """

    groups: Dict[str, Group] = field(default_factory=dict)
    grouped_by: Optional[str] = None

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __getitem__(self, name: str) -> Group:
        return self.groups[name]

    def items(self):
        """Return (name, group) pairs in insertion order."""
        return self.groups.items()
