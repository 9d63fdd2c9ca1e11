# -*- coding: UTF-8 -*-
"""
Created on 31.05.24

Module for working with n-grams.

:author:     Martin Dočekal
"""
import enum
import logging
from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from ngrammer.padding import Padded, PadPolicy

T = TypeVar('T')

logger = logging.getLogger(__name__)


class WindowState(enum.Enum):
    """
    States of the n-gram window.
    """
    FILLING = enum.auto()   # memory is not full yet, nothing was emitted
    EMITTING = enum.auto()
    EXHAUSTED = enum.auto()  # terminal


class NGrams(Generic[T]):
    """
    Lazy sequence of n-grams (overlapping windows of size n) over a source of items.

    It reads the source one item at a time and keeps in memory only the last n - 1 items.

    Example:
        >>> list(NGrams("one two three".split(), 2))
        [['one', 'two'], ['two', 'three']]
        >>> list(NGrams(["a", "b"], 2).pad(PadPolicy.left_only(1), "#"))
        [['#', 'a'], ['a', 'b']]
    """

    def __init__(self, source: Iterable[T], n: int, pad: Optional[PadPolicy] = None, pad_symbol: Optional[T] = None,
                 item_type: Optional[type] = None):
        """
        Nothing is read from the source until the first n-gram is requested.

        :param source: Pre-tokenized source of items. This module does not make any decision about tokenization.
        :param n: Size of n-gram.
        :param pad: Padding of the source. By default, no padding is used.
        :param pad_symbol: Pad symbol. If None, the type level default for item_type is used.
        :param item_type: Type of items, it is used for padding defaults. If None, str is assumed.
        :raise ValueError: When n is lower than 1.
        """
        if n < 1:
            raise ValueError(f"The size of n-gram must be at least 1, got {n}.")

        self.n = n
        self.item_type = item_type
        self.source: Iterator[T] = iter(source)
        self.memory: deque[T] = deque(maxlen=n - 1)
        self.state = WindowState.FILLING

        if pad is not None and not pad.is_none:
            self.pad(pad, pad_symbol)

    def pad(self, policy: Optional[PadPolicy] = None, symbol: Optional[T] = None) -> "NGrams[T]":
        """
        Pads the source.

        :param policy: Padding policy. By default, both sides are padded with the default count (n - 1).
        :param symbol: Pad symbol. If None, the type level default is used.
        :return: self, for chaining
        :raise RuntimeError: When the n-grams are already being read.
        """
        if self.state != WindowState.FILLING or self.memory:
            raise RuntimeError("The padding can not be changed once the reading of n-grams has started.")

        if policy is None:
            policy = PadPolicy.both()

        self.source = Padded.from_policy(self.source, policy, self.n, symbol, self.item_type)
        return self

    def _fill(self) -> bool:
        """
        Fills the memory with first n - 1 items.

        :return: False when the source ended before the memory was filled.
        """
        while len(self.memory) < self.n - 1:
            try:
                self.memory.append(next(self.source))
            except StopIteration:
                logger.debug("Source of %d items is too short for %d-grams.", len(self.memory), self.n)
                return False
        return True

    def __iter__(self) -> "NGrams[T]":
        return self

    def __next__(self) -> list[T]:
        if self.state == WindowState.FILLING:
            if not self._fill():
                self.state = WindowState.EXHAUSTED
                self.memory.clear()
                raise StopIteration
            self.state = WindowState.EMITTING

        if self.state == WindowState.EXHAUSTED:
            raise StopIteration

        try:
            tail = next(self.source)
        except StopIteration:
            self.state = WindowState.EXHAUSTED
            self.memory.clear()
            raise

        res = list(self.memory)
        res.append(tail)
        self.memory.append(tail)   # maxlen drops the oldest one
        return res

    def __repr__(self):
        return f"NGrams(n={self.n}, state={self.state.name})"


def ngrams(tokens: Iterable[T], n: int, pad: Optional[PadPolicy] = None, pad_symbol: Optional[Any] = None,
           item_type: Optional[type] = None) -> NGrams[T]:
    """
    Splits tokens into n-grams.

    :param tokens: Tokens that will be used for n-grams.
    :param n: Size of n-gram.
    :param pad: Padding of tokens. By default, no padding is used.
    :param pad_symbol: Pad symbol. If None, the type level default for item_type is used.
    :param item_type: Type of tokens, used for padding defaults. If None, str is assumed.
    :return: Lazy sequence of n-grams.
    """
    return NGrams(tokens, n, pad, pad_symbol, item_type)
