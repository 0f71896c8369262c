from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray


class PropertyTable:
    """Ordered collection of named arrays aligned with a set of peaks.

    The table is immutable: :meth:`add` and :meth:`select` return a new table.
    Every array in a table has the same number of elements.

    Parameters
    ----------
    items : sequence of tuple
        The ``(name, array)`` pairs, in insertion order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: tuple[tuple[str, NDArray], ...] = ()) -> None:
        names = [name for name, _ in items]
        if len(set(names)) != len(names):
            raise ValueError(f"Property names must be unique, got {names}.")
        sizes = {np.asarray(array).size for _, array in items}
        if 1 < len(sizes):
            raise ValueError(
                f"All property arrays must have the same size, got {sorted(sizes)}."
            )
        self._items = tuple((name, np.asarray(array)) for name, array in items)

    def add(self, name: str, array: NDArray, n_peaks: int) -> PropertyTable:
        """Return a new table with an additional property.

        Parameters
        ----------
        name : str
            Name of the property. Adding an existing name replaces its array.
        array : array of shape (n_peaks,)
            The property of each peak.
        n_peaks : int
            Number of peaks the table is aligned with.

        Returns
        -------
        table : PropertyTable
            The extended table.
        """
        array = np.asarray(array)
        if array.size != n_peaks:
            raise ValueError(
                f"Property '{name}' has {array.size} element(s) while the table is "
                f"aligned with {n_peaks} peak(s)."
            )
        items = tuple(item for item in self._items if item[0] != name)
        return PropertyTable(items + ((name, array),))

    def select(self, keep: NDArray[np.bool_]) -> PropertyTable:
        """Return a new table where every array is filtered by the same mask.

        Parameters
        ----------
        keep : array of shape (n_peaks,)
            Boolean mask, True for the peaks to keep.

        Returns
        -------
        table : PropertyTable
            The filtered table.
        """
        return PropertyTable(tuple((name, array[keep]) for name, array in self._items))

    def as_dict(self) -> dict[str, NDArray]:
        """Copy of the table as a dictionary."""
        return {name: array.copy() for name, array in self._items}

    def keys(self) -> list[str]:  # noqa: D102
        return [name for name, _ in self._items]

    def items(self) -> list[tuple[str, NDArray]]:  # noqa: D102
        return list(self._items)

    def __getitem__(self, name: str) -> NDArray:
        for key, array in self._items:
            if key == name:
                return array
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        """String representation of the property table."""
        return f"<PropertyTable | {', '.join(self.keys()) or 'empty'}>"
