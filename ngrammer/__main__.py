# -*- coding: UTF-8 -*-
"""
Created on 31.05.24
Main module of the ngrammer.

:author:     Martin Dočekal
"""
import logging
import os
import random
import sys
from argparse import ArgumentParser
from contextlib import contextmanager
from typing import Generator, Optional, TextIO

from tqdm import tqdm

from ngrammer.cython.tokenizer import sentence_tokenizer, whitespace_tokenizer
from ngrammer.markov import Markov
from ngrammer.myjson import write_json_lines
from ngrammer.ngrams import ngrams
from ngrammer.normalize import normalize_text, remove_punctuation_table
from ngrammer.padding import PadPolicy, PadSide
from ngrammer.reader import FileReader, HFDatasetReader, JSONLReader, Reader, TSVSentenceReader


def create_reader(dataset: str, format_str: Optional[str] = None, split: Optional[str] = None,
                  dataset_config: Optional[str] = None, hf_cache: Optional[str] = None, tsv: bool = False) -> Reader:
    """
    Creates reader for given dataset.

    :param dataset: Path to the hf dataset, jsonl dataset or tsv sentence corpus.
    :param format_str: This argument allows to select only certain columns and marge them using this formating string.
        E.g.: '{firstname} {lastname}'
    :param split: HF dataset split name.
    :param dataset_config: HF dataset configuration name.
    :param hf_cache: Path to the HF cache.
    :param tsv: The dataset is a sentence corpus with lines in format: id<TAB>sentence
    :return: The reader.
    """
    if tsv:
        return TSVSentenceReader(dataset, format_str)
    if dataset.endswith(".jsonl") or dataset.endswith(".jsonl.gz"):
        return JSONLReader(dataset, format_str)
    return HFDatasetReader(dataset, split, dataset_config, format_str, hf_cache)


@contextmanager
def read_with_progress(reader: Reader, desc: str) -> Generator[Generator[str, None, None], None, None]:
    """
    Opens the reader and iterates its records while showing progress.

    :param reader: Reader of the dataset.
    :param desc: Description of the progress bar.
    :return: generator of records
    """
    file_read = isinstance(reader, FileReader)
    if file_read:
        total = None if reader.dataset.endswith(".gz") else os.path.getsize(reader.dataset)
    else:
        total = len(reader)

    with reader as r, tqdm(desc=desc, total=total) as pbar:
        def records():
            for record in r:
                yield record
                if total is not None and file_read:
                    pbar.update(r.file.tell() - pbar.n)
                else:
                    pbar.update(1)

        yield records()


def tokenize(text: str, chars: bool = False, normalize: bool = False, whitespace: bool = False) -> list[str]:
    """
    Tokenizes text into words or characters.

    :param text: Text to tokenize.
    :param chars: Split text into characters instead of words.
    :param normalize: Converts text to lowercase and removes punctuation before tokenization.
    :param whitespace: Words are split only on whitespace, separators such as commas stay in tokens.
    :return: tokens
    """
    if normalize:
        text = normalize_text(text, remove_punctuation_table)
    if chars:
        return list(text)
    return [t for t, _, _ in (whitespace_tokenizer(text) if whitespace else sentence_tokenizer(text))]


def print_ngrams(dataset: str, n: int, pad_side: str = "none", pad_count: Optional[int] = None,
                 pad_symbol: Optional[str] = None, chars: bool = False, normalize: bool = False,
                 format_str: Optional[str] = None, split: Optional[str] = None, dataset_config: Optional[str] = None,
                 hf_cache: Optional[str] = None, tsv: bool = False, output: Optional[TextIO] = None,
                 whitespace: bool = False) -> int:
    """
    Writes n-grams of every record in the dataset. Each n-gram is written as JSON list on separate line.

    :param dataset: Path to the hf dataset, jsonl dataset or tsv sentence corpus.
    :param n: Size of n-gram.
    :param pad_side: Which sides of a record should be padded (none, left, right, both).
    :param pad_count: Number of pad symbols on each padded side. By default, n - 1.
    :param pad_symbol: Pad symbol. By default, WORD JOINER (U+2060).
    :param chars: Character n-grams instead of word n-grams.
    :param normalize: Converts text to lowercase and removes punctuation before tokenization.
    :param format_str: Format string selecting the content of a record.
    :param split: HF dataset split name.
    :param dataset_config: HF dataset configuration name.
    :param hf_cache: Path to the HF cache.
    :param tsv: The dataset is a sentence corpus with lines in format: id<TAB>sentence
    :param output: Where the n-grams should be written. By default, stdout.
    :param whitespace: Words are split only on whitespace.
    :return: Number of written n-grams.
    """
    if output is None:
        output = sys.stdout

    policy = PadPolicy.from_side(pad_side, pad_count)
    reader = create_reader(dataset, format_str, split, dataset_config, hf_cache, tsv)

    cnt = 0
    with read_with_progress(reader, "Generating n-grams") as records:
        for record in records:
            cnt += write_json_lines(ngrams(tokenize(record, chars, normalize, whitespace), n, policy, pad_symbol), output)

    logging.info("Written %d %d-grams.", cnt, n)
    return cnt


def print_ngrams_entry_point(args):
    print_ngrams(args.dataset, args.n, args.pad, args.pad_count, args.pad_symbol, args.chars, args.normalize,
                 args.format_str, args.split, args.dataset_config, args.hf_cache, args.tsv, whitespace=args.whitespace)


def generate_sentences(dataset: str, sentences: int = 10, seed: Optional[int] = None, max_words: int = 100,
                       format_str: Optional[str] = None, split: Optional[str] = None,
                       dataset_config: Optional[str] = None, hf_cache: Optional[str] = None,
                       tsv: bool = False) -> list[str]:
    """
    Generates random sentences from a Markov chain built on bigrams of the dataset.

    :param dataset: Path to the hf dataset, jsonl dataset or tsv sentence corpus.
    :param sentences: Number of generated sentences.
    :param seed: Seed of the random generator.
    :param max_words: Maximal number of words in a sentence.
    :param format_str: Format string selecting the content of a record.
    :param split: HF dataset split name.
    :param dataset_config: HF dataset configuration name.
    :param hf_cache: Path to the HF cache.
    :param tsv: The dataset is a sentence corpus with lines in format: id<TAB>sentence
    :return: Generated sentences.
    """
    reader = create_reader(dataset, format_str, split, dataset_config, hf_cache, tsv)
    with read_with_progress(reader, "Extracting sentences") as records:
        chain = Markov.from_sentences(tokenize(r) for r in records)

    rng = random.Random(seed)
    return [" ".join(chain.sentence(rng, max_words)) for _ in range(sentences)]


def generate_sentences_entry_point(args):
    for s in generate_sentences(args.dataset, args.sentences, args.seed, args.max_words, args.format_str,
                                args.split, args.dataset_config, args.hf_cache, args.tsv):
        print(s)


def add_dataset_arguments(parser: ArgumentParser):
    parser.add_argument("dataset", help="Path to the hf dataset, jsonl dataset or tsv sentence corpus (see --tsv).")
    parser.add_argument("--format_str", help="This argument allows to select only certain columns and marge them using this formating string. E.g.: '{firstname} {lastname}'", default=None)
    parser.add_argument("--split", help="HF dataset split name.", default=None)
    parser.add_argument("--dataset_config", help="HF dataset configuration name.", default=None)
    parser.add_argument("--hf_cache", help="Path to the HF cache.", default=None)
    parser.add_argument("--tsv", help="The dataset is a sentence corpus (optionally gzipped) with lines in format: id<TAB>sentence", action="store_true")


def main():
    parser = ArgumentParser(description="Tool for generating n-grams from token sequences.")
    parser.add_argument("--verbose", help="Logs also informative messages.", action="store_true")
    subparsers = parser.add_subparsers()

    ngrams_parser = subparsers.add_parser("ngrams", help="Prints n-grams of every record, one JSON list per line.")
    add_dataset_arguments(ngrams_parser)
    ngrams_parser.add_argument("n", help="Size of n-gram.", type=int)
    ngrams_parser.add_argument("--pad", help="Which sides of a record should be padded.", choices=[s.value for s in PadSide], default=PadSide.NONE.value)
    ngrams_parser.add_argument("--pad_count", help="Number of pad symbols on each padded side. By default, n - 1.", type=int, default=None)
    ngrams_parser.add_argument("--pad_symbol", help="Pad symbol. By default, WORD JOINER (U+2060).", default=None)
    ngrams_parser.add_argument("--chars", help="Character n-grams instead of word n-grams.", action="store_true")
    ngrams_parser.add_argument("--normalize", help="Converts text to lowercase and removes punctuation.", action="store_true")
    ngrams_parser.add_argument("--whitespace", help="Words are split only on whitespace, by default also on: \" , ; :", action="store_true")
    ngrams_parser.set_defaults(func=print_ngrams_entry_point)

    markov_parser = subparsers.add_parser("markov", help="Generates random sentences from bigram Markov chain.")
    add_dataset_arguments(markov_parser)
    markov_parser.add_argument("--sentences", help="Number of generated sentences.", type=int, default=10)
    markov_parser.add_argument("--seed", help="Seed of the random generator.", type=int, default=None)
    markov_parser.add_argument("--max_words", help="Maximal number of words in a sentence.", type=int, default=100)
    markov_parser.set_defaults(func=generate_sentences_entry_point)

    args = parser.parse_args()

    logging.basicConfig(format='%(process)d: %(levelname)s : %(asctime)s : %(message)s',
                        level=logging.INFO if args.verbose else logging.WARNING)

    if "func" in args:
        args.func(args)
    else:
        parser.print_help()
        exit(1)


if __name__ == '__main__':
    main()
