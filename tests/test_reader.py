# -*- coding: UTF-8 -*-
"""
Created on 13.09.24

:author:     Martin Dočekal
"""
import gzip
import os
import shutil
from pathlib import Path
from unittest import TestCase

from ngrammer.reader import JSONLReader, TSVSentenceReader

SCRIPT_PATH = os.path.dirname(os.path.realpath(__file__))
TMP_PATH = os.path.join(SCRIPT_PATH, "tmp")
FIXTURES_PATH = os.path.join(SCRIPT_PATH, "fixtures")

JSONL_PATH = os.path.join(FIXTURES_PATH, "records.jsonl")
TSV_PATH = os.path.join(FIXTURES_PATH, "sentences.tsv")
TSV_GZ_PATH = os.path.join(TMP_PATH, "sentences.tsv.gz")


class TestJSONLReader(TestCase):
    def test_format_str(self):
        with JSONLReader(JSONL_PATH, "{title}: {content}") as reader:
            self.assertEqual(
                ["One: one two three four", "Two: Hello, World!", "Three: a"],
                list(reader)
            )

    def test_whole_lines(self):
        with JSONLReader(JSONL_PATH) as reader:
            lines = list(reader)

        self.assertEqual(3, len(lines))
        self.assertEqual('{"id": 1, "title": "One", "content": "one two three four"}', lines[0])

    def test_repeated_iteration(self):
        with JSONLReader(JSONL_PATH, "{id}") as reader:
            self.assertEqual(["1", "2", "3"], list(reader))
            self.assertEqual(["1", "2", "3"], list(reader))


class TestTSVSentenceReader(TestCase):
    def setUp(self):
        with open(TSV_PATH, "rb") as f_in, gzip.open(TSV_GZ_PATH, "wb") as f_out:
            shutil.copyfileobj(f_in, f_out)

    def tearDown(self):
        for f in Path(TMP_PATH).glob('*'):
            if not str(f).endswith("placeholder"):
                os.remove(f)

    def test_plain(self):
        with TSVSentenceReader(TSV_PATH) as reader:
            self.assertEqual(
                ["The cat sleeps.", "The dog, the cat: sleep.", 'A "quiet" night.'],
                list(reader)
            )

    def test_gzip(self):
        with TSVSentenceReader(TSV_GZ_PATH) as reader:
            self.assertEqual(
                ["The cat sleeps.", "The dog, the cat: sleep.", 'A "quiet" night.'],
                list(reader)
            )

    def test_format_str(self):
        with TSVSentenceReader(TSV_PATH, "<{sentence}>") as reader:
            self.assertEqual("<The cat sleeps.>", next(iter(reader)))
