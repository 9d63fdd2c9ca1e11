# -*- coding: UTF-8 -*-
"""
Created on 18.10.26

Module for padding of token sequences with sentinel symbols.

:author:     Martin Dočekal
"""
import enum
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar('T')

WORD_SEP = "\u2060"  # WORD JOINER, invisible and never produced by the tokenizers


@dataclass(frozen=True)
class PadDefaults:
    """
    Type level defaults for padding.
    """
    symbol: Callable[[], Any]   # creates the sentinel
    length: Callable[[int], int]    # number of sentinels for window of size n


def default_pad_len(n: int) -> int:
    """
    Default number of pad symbols on one side, it makes the first/last real item anchor a full window.

    :param n: Size of n-gram.
    :return: n - 1
    """
    return n - 1


_PAD_DEFAULTS: dict[type, PadDefaults] = {
    str: PadDefaults(lambda: WORD_SEP, default_pad_len),
    bytes: PadDefaults(lambda: WORD_SEP.encode("utf-8"), default_pad_len),
}


def register_pad_defaults(item_type: type, symbol: Callable[[], Any],
                          length: Optional[Callable[[int], int]] = None):
    """
    Registers type level padding defaults for items of given type.

    :param item_type: Type of items.
    :param symbol: Factory of the pad symbol.
    :param length: Function that maps n-gram size to number of pad symbols on one side.
        By default, it is n - 1.
    """
    _PAD_DEFAULTS[item_type] = PadDefaults(symbol, default_pad_len if length is None else length)


def find_pad_defaults(item_type: type) -> Optional[PadDefaults]:
    """
    Searches padding defaults for given item type.

    Types may provide their own defaults with pad_symbol() and optionally pad_len(n) classmethods, otherwise
    registered defaults are searched along the MRO.

    :param item_type: Type of items.
    :return: Padding defaults or None when the type has none.
    """
    if hasattr(item_type, "pad_symbol"):
        return PadDefaults(item_type.pad_symbol, getattr(item_type, "pad_len", default_pad_len))

    for t in getattr(item_type, "__mro__", (item_type,)):
        if t in _PAD_DEFAULTS:
            return _PAD_DEFAULTS[t]

    return None


def pad_defaults(item_type: type) -> PadDefaults:
    """
    Obtains padding defaults for given item type.

    :param item_type: Type of items.
    :return: Padding defaults.
    :raise TypeError: When there are no defaults for given type.
    """
    defaults = find_pad_defaults(item_type)
    if defaults is not None:
        return defaults

    raise TypeError(f"There is no default pad symbol for {item_type!r}, please provide the pad symbol explicitly.")


def resolve_pad_symbol(pad_symbol: Optional[Any] = None, item_type: Optional[type] = None) -> Any:
    """
    Selects pad symbol. Explicit symbol has precedence over the type level default.

    :param pad_symbol: Explicit pad symbol.
    :param item_type: Type of items used when the explicit symbol is not given. When both are None, str is assumed.
    :return: Pad symbol.
    """
    if pad_symbol is not None:
        return pad_symbol
    return pad_defaults(str if item_type is None else item_type).symbol()


class PadSide(enum.Enum):
    """
    Sides of a sequence that should be padded.
    """
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


@dataclass(frozen=True)
class PadPolicy:
    """
    Describes where padding is applied and how many pad symbols are inserted.

    None count means the type default (n - 1 for builtin types), 0 means no padding on that side.
    """
    left: Optional[int] = 0
    right: Optional[int] = 0

    def __post_init__(self):
        for side, cnt in (("left", self.left), ("right", self.right)):
            if cnt is not None and cnt < 0:
                raise ValueError(f"The {side} pad count must be non-negative, got {cnt}.")

    @classmethod
    def none(cls) -> "PadPolicy":
        return cls(0, 0)

    @classmethod
    def left_only(cls, count: Optional[int] = None) -> "PadPolicy":
        return cls(count, 0)

    @classmethod
    def right_only(cls, count: Optional[int] = None) -> "PadPolicy":
        return cls(0, count)

    @classmethod
    def both(cls, count: Optional[int] = None) -> "PadPolicy":
        return cls(count, count)

    @classmethod
    def asymmetric(cls, left: Optional[int], right: Optional[int]) -> "PadPolicy":
        return cls(left, right)

    @classmethod
    def from_side(cls, side: "PadSide | str", count: Optional[int] = None) -> "PadPolicy":
        """
        Creates policy that applies given count only on selected sides.

        :param side: Selected sides, either PadSide or its value.
        :param count: Number of pad symbols on each selected side. None means the type default.
        :return: The policy.
        :raise ValueError: For unknown side.
        """
        side = PadSide(side)
        return cls(
            count if side in (PadSide.LEFT, PadSide.BOTH) else 0,
            count if side in (PadSide.RIGHT, PadSide.BOTH) else 0
        )

    @property
    def is_none(self) -> bool:
        return self.left == 0 and self.right == 0

    def counts(self, n: int, item_type: Optional[type] = None) -> Tuple[int, int]:
        """
        Resolves number of pad symbols for each side.

        :param n: Size of n-gram.
        :param item_type: Type of items, it is consulted only for unspecified counts. Default is str.
            Types without padding defaults use n - 1.
        :return: left count, right count
        """
        def resolve(cnt: Optional[int]) -> int:
            if cnt is not None:
                return cnt
            defaults = find_pad_defaults(str if item_type is None else item_type)
            # types without defaults may still be padded with explicit symbol
            length = default_pad_len if defaults is None else defaults.length
            return max(0, length(n))

        return resolve(self.left), resolve(self.right)


class Padded(Generic[T]):
    """
    Lazy sequence that surrounds the source with pad symbols.

    Example:
        >>> list(Padded(["a", "b"], "#", 2, 1))
        ['#', '#', 'a', 'b', '#']
    """

    def __init__(self, source: Iterable[T], symbol: T, left: int, right: int):
        """
        :param source: Source of items.
        :param symbol: Pad symbol.
        :param left: Number of pad symbols before the source.
        :param right: Number of pad symbols after the source.
        :raise ValueError: On negative counts.
        """
        if left < 0 or right < 0:
            raise ValueError(f"Pad counts must be non-negative, got left={left} and right={right}.")

        self.source: Iterator[T] = iter(source)
        self.symbol = symbol
        self.left = left
        self.right = right
        self._left_remaining = left
        self._right_remaining = 0
        self._source_exhausted = False

    @classmethod
    def for_window(cls, source: Iterable[T], n: int, symbol: Optional[T] = None,
                   item_type: Optional[type] = None) -> "Padded[T]":
        """
        Pads both sides with the default count for n-grams of size n (n - 1 for builtin types).

        :param source: Source of items.
        :param n: Size of n-gram.
        :param symbol: Pad symbol. If None the type level default is used.
        :param item_type: Type of items, used for defaults.
        :return: Padded source.
        """
        return cls.from_policy(source, PadPolicy.both(), n, symbol, item_type)

    @classmethod
    def from_side(cls, source: Iterable[T], symbol: T, side: "PadSide | str", count: int) -> "Padded[T]":
        """
        Pads only the selected sides with the same count.

        :param source: Source of items.
        :param symbol: Pad symbol.
        :param side: Which sides should be padded.
        :param count: Number of pad symbols on each selected side.
        :return: Padded source.
        :raise ValueError: When the count is not given or negative.
        """
        if count is None:
            raise ValueError("The pad count must be given explicitly, use from_policy for the default count.")
        left, right = PadPolicy.from_side(side, count).counts(0)
        return cls(source, symbol, left, right)

    @classmethod
    def from_policy(cls, source: Iterable[T], policy: PadPolicy, n: int, symbol: Optional[T] = None,
                    item_type: Optional[type] = None) -> "Padded[T]":
        """
        Pads the source according to the policy.

        :param source: Source of items.
        :param policy: Padding policy.
        :param n: Size of n-gram, used to resolve default counts.
        :param symbol: Pad symbol. If None the type level default is used.
        :param item_type: Type of items, used for defaults.
        :return: Padded source.
        """
        left, right = policy.counts(n, item_type)
        return cls(source, resolve_pad_symbol(symbol, item_type), left, right)

    def __iter__(self) -> "Padded[T]":
        return self

    def __next__(self) -> T:
        if self._left_remaining > 0:
            self._left_remaining -= 1
            return self.symbol

        if not self._source_exhausted:
            try:
                return next(self.source)
            except StopIteration:
                # first time we see the end, the right padding starts
                self._source_exhausted = True
                self._right_remaining = self.right

        if self._right_remaining > 0:
            self._right_remaining -= 1
            return self.symbol

        raise StopIteration

    def __repr__(self):
        return f"Padded(symbol={self.symbol!r}, left={self.left}, right={self.right})"
