from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Iterable, Union, cast, get_args, get_origin


def iterable_from_file(path: Union[str, Path]) -> Iterable[str]:
    with open(path, 'r') as file:
        for line in file:
            yield line


def split_fields(text: str, sep: str) -> list[str]:
    """Splits text on sep, dropping trailing empty fields.

        'a:b:' splits into ['a', 'b'] and ',,' into [], which is how most
        RTTTL producers expect a trailing separator to be read.
    """
    parts = text.split(sep)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def from_json(cls: type, data: Any):
    """Deserializes a json object into a dataclass instance.

    This handles nested data classes and dict and list fields.

    Args:
        cls (type): Target class.
        data (Any): The json object to deserialize.

    Returns:
        An instance of the target class.
    """
    if is_dataclass(cls):
        field_types = {f.name: f.type for f in fields(cls)}
        return cls(**{
            key: from_json(cast(type, field_types[key]), value)
            for key, value in data.items()
        })

    origin = get_origin(cls)

    if origin is list:
        item_type = get_args(cls)[0]
        return [from_json(item_type, item) for item in data]
    elif origin is dict:
        item_type = get_args(cls)[1]
        return {
            key: from_json(item_type, value)
            for key, value in data.items()
        }
    else:
        return data
