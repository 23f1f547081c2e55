import logging
import numbers
from collections.abc import MutableSet
from collections.abc import Set as AbstractSet
from itertools import chain
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Set, TypeVar

from sortedset import conf

T = TypeVar('T')

logger = logging.getLogger(__name__)


class SortedSetError(Exception):
    """Base class for errors raised by SortedSet"""

    pass


class InvalidElementError(SortedSetError, TypeError):
    """Raised when inserting an element that does not support ordering"""

    pass


class IncomparableElementsError(SortedSetError, TypeError):
    """Raised when the members of a set cannot be compared with each other"""

    pass


class ImmutableStateError(SortedSetError):
    """Raised when trying to modify a frozen set"""

    pass


def _supports_ordering(value) -> bool:
    # NOTE: complex defines < only to raise TypeError
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return False
    # NOTE: list.sort only uses <, which falls back to the reflected >
    cls = type(value)
    return cls.__lt__ is not object.__lt__ or cls.__gt__ is not object.__gt__


def _elements(iterable):
    # NOTE: Reading another SortedSet does not need its order
    return iterable._members if isinstance(iterable, SortedSet) else iterable


def _require_callable(function, name):
    if not callable(function):
        raise TypeError(f'{name} must be callable, not {type(function).__name__}')


class SortedSet(Generic[T], MutableSet):
    """A set that iterates over its members in ascending order

    Members are kept in a regular set. A sorted list of them is built the first
    time the order is needed and reused until the membership changes.

    All elements must support ordering and must be mutually comparable. The
    former is checked whenever elements are inserted, the latter when the set
    is first iterated over.

    Parameters
    ----------
    iterable : Iterable
        Initial elements. Duplicates are collapsed.
    key : callable
        Optional function of one argument used to extract a comparison key
        from each element, as for :func:`sorted`.

    Example
    -------
    >>> from sortedset import SortedSet
    >>> s = SortedSet([2, 1, 5, 6, 4, 5, 3, 3, 3])
    >>> s.to_list()
    [1, 2, 3, 4, 5, 6]
    >>> s.add(0).discard(6)
    SortedSet([0, 1, 2, 3, 4, 5])
    """

    def __init__(
        self, iterable: Optional[Iterable[T]] = None, *, key: Optional[Callable[[T], Any]] = None
    ):
        self._key = key
        self._frozen = False
        self._keys: Optional[List[T]] = None
        self._members: Set[T] = set() if iterable is None else set(self._validated(iterable))

    @classmethod
    def of(cls, *values: T):
        """Create a SortedSet from its arguments

        >>> from sortedset import SortedSet
        >>> SortedSet.of(3, 1, 2)
        SortedSet([1, 2, 3])
        """
        return cls(values)

    # NOTE: The following are required by the MutableSet ABC

    def __contains__(self, value):
        return value in self._members

    def __iter__(self) -> Iterator[T]:
        # NOTE: The cache is replaced and never edited in place so a live
        # iterator is not affected by later mutations.
        return iter(self._sorted())

    def __len__(self):
        return len(self._members)

    def add(self, value: T):
        """Add an element

        Raises
        ------
        InvalidElementError
            If the element does not support ordering
        ImmutableStateError
            If the set is frozen
        """
        self._check_mutable()
        self._validate(value)
        if value not in self._members:
            self._members.add(value)
            self._keys = None
        return self

    def discard(self, value: T):
        """Remove an element if it is a member"""
        self._check_mutable()
        if value in self._members:
            self._members.remove(value)
            self._keys = None
        return self

    # NOTE: The following mimic the behavior of native sets

    def remove(self, value: T):
        self._check_mutable()
        if value not in self._members:
            raise KeyError(value)
        return self.discard(value)

    def pop(self) -> T:
        """Remove and return the smallest element"""
        self._check_mutable()
        if not self._members:
            raise KeyError('pop from an empty set')
        value = self._sorted()[0]
        self._members.remove(value)
        self._keys = None
        return value

    def clear(self):
        self._check_mutable()
        self._members.clear()
        self._keys = None
        return self

    def update(self, *iterables: Iterable[T]):
        """Add all elements of all iterables

        Either all elements are added or, if one of them is invalid, none.
        """
        self._check_mutable()
        self._members = self._members.union(
            self._validated(chain.from_iterable(map(_elements, iterables)))
        )
        self._keys = None
        return self

    def copy(self):
        new = self.__class__(key=self._key)
        new._members = set(self._members)
        new._keys = self._keys
        return new

    __copy__ = copy

    def _from_iterable(self, iterable):
        # NOTE: Used by the operators of the Set ABC. Keeps the key function.
        return self.__class__(iterable, key=self._key)

    def __le__(self, other):
        # NOTE: Comparing does not need the order
        if not isinstance(other, AbstractSet):
            return NotImplemented
        if len(self) > len(other):
            return False
        return all(value in other for value in self._members)

    def __ior__(self, it):
        return self.update(it)

    # NOTE: The in-place operators below work on the underlying set directly.
    # They never need the order and always check for a frozen set first.

    def __iand__(self, it):
        self._check_mutable()
        if it is self:
            return self
        return self._assign(self._members.intersection(_elements(it)))

    def __isub__(self, it):
        self._check_mutable()
        if it is self:
            return self.clear()
        return self._assign(self._members.difference(_elements(it)))

    def __ixor__(self, it):
        self._check_mutable()
        if it is self:
            return self.clear()
        self._members = self._members.symmetric_difference(self._validated(it))
        self._keys = None
        return self

    def _assign(self, members):
        # NOTE: Only for results that are subsets of the current members
        if len(members) != len(self._members):
            self._keys = None
        self._members = members
        return self

    # NOTE: The following are specific to SortedSet

    def replace(self, iterable: Iterable[T]):
        """Replace all members with the elements of iterable"""
        self._check_mutable()
        self._members = set(self._validated(iterable))
        self._keys = None
        return self

    def remove_if(self, predicate: Callable[[T], bool]):
        """Remove all members for which predicate is true"""
        _require_callable(predicate, 'predicate')
        self._check_mutable()
        return self._assign({value for value in self._members if not predicate(value)})

    def retain_if(self, predicate: Callable[[T], bool]):
        """Remove all members for which predicate is false"""
        _require_callable(predicate, 'predicate')
        self._check_mutable()
        return self._assign({value for value in self._members if predicate(value)})

    def rehash(self):
        """Rebuild the underlying set

        Needed after members have been changed in a way that changes their hash.
        """
        self._check_mutable()
        # NOTE: Building from a set would reuse the stored hashes
        self._members = set(list(self._members))
        self._keys = None
        return self

    def to_list(self) -> List[T]:
        """All members in ascending order

        The returned list is a copy and can be modified freely.

        Raises
        ------
        IncomparableElementsError
            If two members cannot be compared
        """
        return list(self._sorted())

    def each(self, visitor: Callable[[T], Any]):
        """Call visitor with every member in ascending order"""
        _require_callable(visitor, 'visitor')
        for value in self._sorted():
            visitor(value)
        return self

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._sorted())

    def first(self) -> T:
        if not self._members:
            raise KeyError('first of an empty set')
        return self._sorted()[0]

    def last(self) -> T:
        if not self._members:
            raise KeyError('last of an empty set')
        return self._sorted()[-1]

    def freeze(self):
        """Make the set permanently immutable

        The order is computed before freezing so that a frozen set never
        needs to sort.
        """
        if not self._frozen:
            self._sorted()
            self._frozen = True
            logger.debug('Froze %s with %d members', self.__class__.__name__, len(self._members))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _sorted(self) -> List[T]:
        if self._keys is None:
            keys = list(self._members)
            try:
                keys.sort(key=self._key)
            except TypeError as exc:
                raise IncomparableElementsError(
                    f'Members of {self.__class__.__name__} are not mutually comparable: {exc}'
                ) from exc
            logger.debug('Rebuilt sorted cache with %d members', len(keys))
            self._keys = keys
        return self._keys

    def _check_mutable(self):
        if self._frozen:
            raise ImmutableStateError(f'Cannot modify frozen {self.__class__.__name__}')

    def _validate(self, value):
        key = value if self._key is None else self._key(value)
        if not _supports_ordering(key):
            raise InvalidElementError(
                f'Value must support ordering: {value!r} ({type(key).__name__})'
            )

    def _validated(self, iterable: Iterable[T]) -> List[T]:
        values = list(_elements(iterable))
        for value in values:
            self._validate(value)
        return values

    def __repr__(self):
        c = self.__class__.__name__
        if not self._members:
            return f'{c}()'
        try:
            values = self._sorted()
        except IncomparableElementsError:
            # NOTE: Shown in set notation since there is no order
            return f'{c}({{{self._format(list(self._members))}}})'
        return f'{c}([{self._format(values)}])'

    def _format(self, values):
        limit = conf.repr_limit
        items = [repr(value) for value in values[:limit]]
        if len(values) > limit:
            items.append('...')
        return ', '.join(items)
