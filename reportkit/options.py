"""Options container shared by renderers and formatters."""

from typing import Any, Dict, Iterator, Optional, Union


class Options:
    """Loosely typed bag of named settings.

    Options are readable both as attributes and as items. Reading a name
    that was never set returns None rather than raising, so formatters can
    test for optional settings with a plain truth check::

        options = Options(data=table, title="Sales")
        options.title        # "Sales"
        options["title"]     # "Sales"
        options.io           # None

    Writes are last-write-wins.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None, **kwargs):
        object.__setattr__(self, "_values", {})
        if values:
            self.update(values)
        if kwargs:
            self.update(kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._values.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delattr__(self, name: str) -> None:
        self._values.pop(name, None)

    def __getitem__(self, name: str) -> Any:
        return self._values.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Options):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Options({self._values!r})"

    def get(self, name: str, default: Any = None) -> Any:
        """Return the option value, or default when it is unset."""
        return self._values.get(name, default)

    def update(self, values: Union[Dict[str, Any], "Options"]) -> None:
        """Merge values into the container, overwriting existing names."""
        if isinstance(values, Options):
            values = values.to_dict()
        self._values.update(values)

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the stored values."""
        return dict(self._values)
