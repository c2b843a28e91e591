"""Runtime sequence values produced by list and tuple literals."""

__all__ = ["Mutability", "SequenceValue", "Tuple", "MutableList"]

from collections.abc import Sequence

import sprig


class Mutability:
    """Ownership domain shared by the mutable values of one environment.

    Lists remember the domain of the environment that created them. While
    the domain is open every alias of a list sees the same mutations. Once
    the domain is frozen, which happens when its environment is finished,
    the lists become read-only. Freezing cannot be undone.

    Args:
        name: (str) Label used in error messages and repr
    """
    __slots__ = ("name", "_frozen")

    def __init__(self, name="mutability"):
        self.name = name
        self._frozen = False

    @property
    def frozen(self):
        """(bool) True once values of this domain may no longer change."""
        return self._frozen

    def freeze(self):
        """Close the domain."""
        self._frozen = True

    def __repr__(self):
        state = "frozen" if self._frozen else "open"
        return f"Mutability({self.name!r}, {state})"


class SequenceValue(Sequence):
    """Ordered read-only view shared by lists and tuples.

    Indexing, slicing, length, iteration and containment are available on
    both kinds. Only `MutableList` adds mutation.
    """
    __slots__ = ("_items",)
    is_tuple = False

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._items[index])
        return self._items[index]

    def __iter__(self):
        return iter(self._items)

    def __contains__(self, item):
        return item in self._items

    def __bool__(self):
        return bool(self._items)

    def _derive(self, items):
        raise NotImplementedError(f"{self.__class__.__name__}._derive() not implemented")

    def __repr__(self):
        return sprig.repr_value(self)


class Tuple(SequenceValue):
    """Immutable fixed size sequence.

    Tuples compare and hash by contents, so they can be shared freely
    without copying.
    """
    __slots__ = ()
    is_tuple = True
    EMPTY = None  # Assigned after class creation

    def __init__(self, items=()):
        self._items = tuple(items)

    @classmethod
    def copy_of(cls, items):
        """Snapshot any iterable into a tuple.

        Existing tuples are returned as-is and empty input returns the shared
        empty tuple.

        Args:
            items: (Iterable) Elements in order

        Returns:
            (Tuple) Tuple holding the elements
        """
        if isinstance(items, Tuple):
            return items
        snapshot = tuple(items)
        if not snapshot and cls.EMPTY is not None:
            return cls.EMPTY
        result = cls.__new__(cls)
        result._items = snapshot
        return result

    def _derive(self, items):
        return Tuple.copy_of(items)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(self._items)

    def __add__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.copy_of(self._items + other._items)


Tuple.EMPTY = Tuple()


class MutableList(SequenceValue):
    """Ordered resizable sequence bound to an environment's mutability.

    Lists have identity semantics: aliases share one underlying buffer and
    lists are never hashable. Every mutating method first checks that the
    owning domain is still open.

    Args:
        items: (Iterable) Initial contents, copied
        env: (Environment | None) Environment whose domain owns the list,
            or None for a list that is always mutable
    """
    __slots__ = ("mutability",)
    __hash__ = None

    def __init__(self, items=(), env=None):
        self._items = list(items)
        if env is None:
            self.mutability = Mutability("detached")
        else:
            self.mutability = env.mutability

    @classmethod
    def in_domain(cls, items, mutability):
        """Create a list owned by an existing mutability domain."""
        result = cls.__new__(cls)
        result._items = list(items)
        result.mutability = mutability
        return result

    def _derive(self, items):
        return MutableList.in_domain(items, self.mutability)

    def _check_mutable(self):
        if self.mutability.frozen:
            raise sprig.EvalError("trying to mutate a frozen list")

    def append(self, item):
        self._check_mutable()
        self._items.append(item)

    def extend(self, items):
        self._check_mutable()
        self._items.extend(items)

    def insert(self, index, item):
        self._check_mutable()
        self._items.insert(index, item)

    def remove(self, item):
        self._check_mutable()
        try:
            self._items.remove(item)
        except ValueError:
            raise sprig.EvalError(f"item {sprig.repr_value(item)} not found in list") from None

    def pop(self, index=-1):
        self._check_mutable()
        try:
            return self._items.pop(index)
        except IndexError:
            raise sprig.EvalError(f"index {index} out of range for list of length {len(self._items)}") from None

    def clear(self):
        self._check_mutable()
        self._items.clear()

    def __setitem__(self, index, item):
        self._check_mutable()
        self._items[index] = item

    def __delitem__(self, index):
        self._check_mutable()
        del self._items[index]

    def __eq__(self, other):
        if not isinstance(other, MutableList):
            return NotImplemented
        return self._items == other._items

    def __add__(self, other):
        if not isinstance(other, MutableList):
            return NotImplemented
        return MutableList.in_domain(self._items + other._items, self.mutability)
