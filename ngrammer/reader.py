# -*- coding: UTF-8 -*-
"""
Created on 03.06.24

Readers of corpora. They provide the raw text records that are tokenized and split into n-grams.

:author:     Martin Dočekal
"""
import gzip
from abc import ABC, abstractmethod
from typing import Generator, Optional

from datasets import load_dataset

from ngrammer.myjson import json_loads


class Reader(ABC):
    """
    Abstract reader class.
    """

    def __init__(self, format_str: Optional[str]):
        """
        Initializes reader.

        :param format_str: Format string that will be used for formatting the output.
        """
        self.format_str = format_str

    @abstractmethod
    def __enter__(self):
        ...

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        ...

    @abstractmethod
    def __iter__(self) -> Generator[str, None, None]:
        ...


class HFDatasetReader(Reader):
    """
    Reader for the HF dataset.
    """

    def __init__(self, dataset: str, split: str, config_name: Optional[str], format_str: str,
                 hf_cache: Optional[str] = None):
        """
        Initializes reader.

        :param dataset: Path to the HF dataset.
        :param split: Split name of the dataset.
        :param config_name: Name of the configuration.
        :param format_str: Format string that will be used for formatting the output.
        :param hf_cache: Path to the HF cache.
        """
        super().__init__(format_str)
        self.dataset = dataset
        self.config_name = config_name
        self._reader = load_dataset(dataset, config_name, cache_dir=hf_cache)[split]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def __iter__(self):
        for data in self._reader:
            yield self.format_str.format(**data)

    def __len__(self):
        return len(self._reader)


class FileReader(Reader, ABC):
    """
    Base class for readers of line oriented files. Files with .gz suffix are decompressed on the fly.
    """

    def __init__(self, dataset: str, format_str: Optional[str] = None):
        """
        Initializes reader.

        :param dataset: Path to the dataset.
        :param format_str: Format string that will be used for formatting the output.
        """
        super().__init__(format_str)
        self.dataset = dataset
        self.file = None

    def __enter__(self):
        if self.dataset.endswith(".gz"):
            self.file = gzip.open(self.dataset, "rt", encoding="utf-8")
        else:
            self.file = open(self.dataset, "r", encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.file.close()

    def lines(self) -> Generator[str, None, None]:
        """
        Reads lines of the file from its beginning.

        :return: lines without the trailing newline
        """
        self.file.seek(0)
        while line := self.file.readline():
            yield line.rstrip("\n")


class JSONLReader(FileReader):
    """
    Reader for the JSONL dataset.
    """

    def __init__(self, dataset: str, format_str: Optional[str] = None):
        """
        Initializes reader.

        :param dataset: Path to the JSONL dataset.
        :param format_str: Format string that will be used for formatting the output.
            If None whole line will be returned.
        """
        super().__init__(dataset, format_str)

    def __iter__(self):
        if self.format_str is None:
            yield from self.lines()
        else:
            for line in self.lines():
                yield self.format_str.format(**json_loads(line))


class TSVSentenceReader(FileReader):
    """
    Reader for sentence corpora with lines in format: id<TAB>sentence

    Example:
        1	The first sentence.
        2	The second one.
    """

    def __iter__(self):
        for line in self.lines():
            if not line:
                continue
            sentence = line.split("\t", maxsplit=2)[1]
            yield sentence if self.format_str is None else self.format_str.format(sentence=sentence)
