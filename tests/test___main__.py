# -*- coding: UTF-8 -*-
"""
Created on 31.05.24

:author:     Martin Dočekal
"""
import io
import json
import os
from unittest import TestCase, mock

from tqdm import tqdm

from ngrammer.__main__ import create_reader, generate_sentences, print_ngrams, tokenize
from ngrammer.padding import WORD_SEP
from ngrammer.reader import JSONLReader, TSVSentenceReader

SCRIPT_PATH = os.path.dirname(os.path.realpath(__file__))
FIXTURES_PATH = os.path.join(SCRIPT_PATH, "fixtures")

JSONL_PATH = os.path.join(FIXTURES_PATH, "records.jsonl")
TSV_PATH = os.path.join(FIXTURES_PATH, "sentences.tsv")


class TestTokenize(TestCase):
    def test_words(self):
        self.assertEqual(["Hello", "World!"], tokenize("Hello, World!"))

    def test_normalize(self):
        self.assertEqual(["hello", "world"], tokenize("Hello, World!", normalize=True))

    def test_whitespace(self):
        self.assertEqual(["Hello,", "World!"], tokenize("Hello, World!", whitespace=True))
        self.assertEqual(["a:b", "c"], tokenize("a:b c", whitespace=True))

    def test_chars(self):
        self.assertEqual(["a", " ", "b"], tokenize("a b", chars=True))


class TestCreateReader(TestCase):
    def test_select(self):
        self.assertIsInstance(create_reader(JSONL_PATH, "{content}"), JSONLReader)
        self.assertIsInstance(create_reader(TSV_PATH, tsv=True), TSVSentenceReader)


class TestPrintNgrams(TestCase):
    def run_print(self, *args, **kwargs) -> list:
        out = io.StringIO()
        cnt = print_ngrams(*args, output=out, **kwargs)
        res = [json.loads(line) for line in out.getvalue().splitlines()]
        self.assertEqual(cnt, len(res))
        return res

    def test_no_padding(self):
        self.assertEqual(
            [["one", "two"], ["two", "three"], ["three", "four"], ["Hello", "World!"]],
            self.run_print(JSONL_PATH, 2, format_str="{content}")
        )

    def test_padding_both(self):
        self.assertEqual(
            [
                ["∅", "one"], ["one", "two"], ["two", "three"], ["three", "four"], ["four", "∅"],
                ["∅", "hello"], ["hello", "world"], ["world", "∅"],
                ["∅", "a"], ["a", "∅"],
            ],
            self.run_print(JSONL_PATH, 2, "both", pad_symbol="∅", normalize=True, format_str="{content}")
        )

    def test_padding_default_symbol(self):
        res = self.run_print(JSONL_PATH, 3, "right", 1, format_str="{content}")
        self.assertEqual(
            [["one", "two", "three"], ["two", "three", "four"], ["three", "four", WORD_SEP], ["Hello", "World!", WORD_SEP]],
            res
        )

    def test_chars(self):
        res = self.run_print(JSONL_PATH, 2, "left", 1, pad_symbol="#", chars=True, format_str="{title}")
        self.assertEqual(
            [["#", "O"], ["O", "n"], ["n", "e"], ["#", "T"], ["T", "w"], ["w", "o"],
             ["#", "T"], ["T", "h"], ["h", "r"], ["r", "e"], ["e", "e"]],
            res
        )

    def test_whitespace(self):
        self.assertEqual(
            [["one", "two"], ["two", "three"], ["three", "four"], ["Hello,", "World!"]],
            self.run_print(JSONL_PATH, 2, format_str="{content}", whitespace=True)
        )

    def test_invalid_n(self):
        with self.assertRaises(ValueError):
            self.run_print(JSONL_PATH, 0, format_str="{content}")


class TestGenerateSentences(TestCase):
    def test_generate(self):
        sentences = generate_sentences(TSV_PATH, 5, seed=3, tsv=True)
        self.assertEqual(5, len(sentences))
        for s in sentences:
            words = s.split(" ")
            self.assertEqual(words[0] in {"The", "A"}, True)
            self.assertTrue(words[-1].endswith("."))

    def test_single_progress_bar(self):
        with mock.patch("ngrammer.__main__.tqdm", wraps=tqdm) as bar:
            generate_sentences(TSV_PATH, 1, seed=0, tsv=True)
        self.assertEqual(1, bar.call_count)

    def test_reproducible(self):
        self.assertEqual(
            generate_sentences(TSV_PATH, 3, seed=7, tsv=True),
            generate_sentences(TSV_PATH, 3, seed=7, tsv=True)
        )
