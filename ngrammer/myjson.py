# -*- coding: UTF-8 -*-
"""
Created on 31.05.24

JSON helpers. Dumping is done with json (to keep non-ascii characters readable), loading with orjson.

:author:     Martin Dočekal
"""
import json
from typing import Any, Iterable, TextIO

import orjson


def json_dumps(obj) -> str:
    """
    Serializes object to JSON string.

    :param obj: Object to serialize.
    :return: JSON string.
    """

    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)


def json_loads(json_str: str) -> Any:
    """
    Deserializes object from JSON string.

    :param json_str: JSON string.
    :return: Deserialized object.
    """

    return orjson.loads(json_str)


def write_json_lines(objs: Iterable, file: TextIO) -> int:
    """
    Writes every object as a JSON on separate line.

    :param objs: Objects to serialize.
    :param file: Opened text file.
    :return: Number of written lines.
    """
    cnt = 0
    for obj in objs:
        print(json_dumps(obj), file=file)
        cnt += 1
    return cnt
