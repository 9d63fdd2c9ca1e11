# -*- coding: UTF-8 -*-
"""
Created on 18.10.26

Markov chain text generator built on top of padded bigrams.

:author:     Martin Dočekal
"""
import logging
import random
from collections import defaultdict
from typing import Generator, Iterable, Optional, Sequence

from ngrammer.ngrams import ngrams
from ngrammer.padding import PadPolicy, WORD_SEP

logger = logging.getLogger(__name__)


class Markov:
    """
    First order Markov chain over words.

    Every sentence is padded with one pad symbol on both sides, thus the pad symbol marks the start and the end
    of a sentence in the transition table.
    """

    def __init__(self, pad_symbol: str = WORD_SEP):
        """
        :param pad_symbol: Symbol marking the start and the end of a sentence.
        """
        self.pad_symbol = pad_symbol
        self.transitions: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))

    def add_sentence(self, tokens: Iterable[str]):
        """
        Adds bigrams of the tokenized sentence into the transition table.

        :param tokens: Tokens of a sentence.
        """
        for first, second in ngrams(tokens, 2, PadPolicy.both(1), self.pad_symbol):
            self.transitions[first][second] += 1

    @classmethod
    def from_sentences(cls, sentences: Iterable[Sequence[str]], pad_symbol: str = WORD_SEP) -> "Markov":
        """
        Builds the chain from tokenized sentences.

        :param sentences: Tokenized sentences.
        :param pad_symbol: Symbol marking the start and the end of a sentence.
        :return: The chain.
        """
        chain = cls(pad_symbol)
        for tokens in sentences:
            chain.add_sentence(tokens)
        logger.info("The chain has %d states.", len(chain.transitions))
        return chain

    def random_word(self, word: str, rng: random.Random) -> str:
        """
        Samples a successor of the word with probability proportional to the bigram frequency.

        :param word: Current word.
        :param rng: Random generator.
        :return: Successor, the pad symbol when the word has no successor.
        """
        successors = self.transitions.get(word)
        if not successors:
            return self.pad_symbol
        return rng.choices(list(successors.keys()), weights=list(successors.values()))[0]

    def sentence(self, rng: Optional[random.Random] = None, max_words: int = 100) -> Generator[str, None, None]:
        """
        Generates words of a random sentence.

        The generation stops at a word ending with a full stop, at the end of sentence or after max_words.

        :param rng: Random generator. New one is created when None.
        :param max_words: Maximal number of generated words.
        :return: Generator of words.
        """
        if rng is None:
            rng = random.Random()

        state = self.pad_symbol
        for _ in range(max_words):
            state = self.random_word(state, rng)
            if state == self.pad_symbol:
                return
            yield state
            if state.endswith("."):
                return
