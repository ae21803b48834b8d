"""src/weburl/api/search_params.py

Ordered query-string multimap.
"""

from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from weburl.encoding import form

__all__ = ["URLSearchParams"]

SearchParamsInit = Union[
    None, str, "URLSearchParams", Mapping[str, Any], Iterable[Sequence[Any]]
]


def _code_units(name: str) -> bytes:
    # Big-endian UTF-16 bytes sort in code unit order.
    return name.encode("utf-16-be", "surrogatepass")


class URLSearchParams:
    """
    Ordered list of name/value pairs with application/x-www-form-urlencoded
    serialization.

    Duplicate names are allowed and insertion order is kept. When obtained
    from :attr:`URL.search_params` the object is bound to its URL: every
    mutation rewrites the URL's query.
    """

    __slots__ = ("_list", "_update")

    def __init__(self, init: SearchParamsInit = None):
        """
        Initialize URLSearchParams.

        Args:
            init: Query string (a leading ``?`` is ignored), another
                URLSearchParams, a mapping, or an iterable of name/value
                pairs.

        Raises:
            TypeError: If a pair does not have exactly two items.
        """
        self._list: List[Tuple[str, str]] = []
        self._update: Optional[Callable[[], None]] = None

        if init is None:
            return
        if isinstance(init, str):
            self._list = form.parse(init)
        elif isinstance(init, URLSearchParams):
            self._list = list(init._list)
        elif isinstance(init, Mapping):
            self._list = [(str(name), str(value)) for name, value in init.items()]
        else:
            for pair in init:
                if isinstance(pair, str) or len(pair) != 2:
                    raise TypeError(
                        f"URLSearchParams: expected a name/value pair, got {pair!r}"
                    )
                self._list.append((str(pair[0]), str(pair[1])))

    def _bind(self, update: Optional[Callable[[], None]]) -> None:
        """Install (or clear) the owner's update callback."""
        self._update = update

    def _reset(self, query: str) -> None:
        """Replace the pairs with a parsed query, without notifying the owner."""
        self._list = form.parse(query)

    def _notify(self) -> None:
        if self._update is not None:
            self._update()

    @property
    def size(self) -> int:
        """Number of name/value pairs."""
        return len(self._list)

    def append(self, name: str, value: str) -> None:
        """Add a pair at the end, keeping existing pairs with the same name."""
        self._list.append((str(name), str(value)))
        self._notify()

    def delete(self, name: str, value: Optional[str] = None) -> None:
        """
        Remove all pairs with a name.

        Args:
            name: Name to remove.
            value: When given, only pairs with this value are removed.
        """
        name = str(name)
        if value is None:
            self._list = [pair for pair in self._list if pair[0] != name]
        else:
            target = (name, str(value))
            self._list = [pair for pair in self._list if pair != target]
        self._notify()

    def get(self, name: str) -> Optional[str]:
        """First value for a name, or None."""
        name = str(name)
        for key, value in self._list:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> List[str]:
        """All values for a name, in order."""
        name = str(name)
        return [value for key, value in self._list if key == name]

    def has(self, name: str, value: Optional[str] = None) -> bool:
        """Whether a pair with the name (and value, if given) exists."""
        name = str(name)
        if value is None:
            return any(key == name for key, _ in self._list)
        return (name, str(value)) in self._list

    def set(self, name: str, value: str) -> None:
        """
        Set the value of the first pair with a name and drop the others.

        Appends a new pair if the name is not present.
        """
        name, value = str(name), str(value)
        result: List[Tuple[str, str]] = []
        found = False
        for pair in self._list:
            if pair[0] != name:
                result.append(pair)
            elif not found:
                result.append((name, value))
                found = True
        if not found:
            result.append((name, value))
        self._list = result
        self._notify()

    def sort(self) -> None:
        """Stable sort by name, comparing UTF-16 code units."""
        self._list.sort(key=lambda pair: _code_units(pair[0]))
        self._notify()

    def entries(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (name, value) pairs."""
        return iter(list(self._list))

    def keys(self) -> Iterator[str]:
        """Iterate over names, duplicates included."""
        return (name for name, _ in self.entries())

    def values(self) -> Iterator[str]:
        """Iterate over values."""
        return (value for _, value in self.entries())

    def for_each(self, callback: Callable[[str, str, "URLSearchParams"], Any]) -> None:
        """
        Call ``callback(value, name, params)`` for every pair.

        Raises:
            TypeError: If callback is not callable.
        """
        if not callable(callback):
            raise TypeError("URLSearchParams.for_each: callback must be callable")
        for name, value in self.entries():
            callback(value, name, self)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.entries()

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URLSearchParams):
            return NotImplemented
        return self._list == other._list

    def __str__(self) -> str:
        return form.serialize(self._list)

    def __repr__(self) -> str:
        return f"URLSearchParams({str(self)!r})"
