# -*- coding: UTF-8 -*-
"""
Created on 31.05.24

Text preprocessing applied before tokenization.

:author:     Martin Dočekal
"""
import string
import unicodedata
from typing import Optional

from ngrammer.padding import WORD_SEP

remove_punctuation_table = str.maketrans(string.punctuation, " " * len(string.punctuation))
remove_pad_table = {ord(WORD_SEP): None}


def normalize_text(text: str, sub_table: Optional[dict[int, int]] = None, lowercase: bool = True) -> str:
    """
    Normalizes text to NFC, optionally converts it to lowercase and substitutes characters.

    The default pad symbol is always removed, so it can not be confused with padding.

    :param text: Text to be normalized.
    :param sub_table: Table for substitution of characters. By default, nothing is substituted. Use
        remove_punctuation_table to replace punctuation with spaces.
    :param lowercase: Whether the text should be converted to lowercase.
    :return: Normalized text.
    """
    text = unicodedata.normalize("NFC", text).translate(remove_pad_table)
    if lowercase:
        text = text.lower()
    if sub_table is not None:
        text = text.translate(sub_table)
    return text
