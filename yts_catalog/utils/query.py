"""Serialization of list_movies.json query parameters."""

import operator
from enum import Enum
from typing import Dict, Type, TypeVar, Union
from urllib.parse import urlencode

from yts_catalog.utils.error_handlings import InvalidQueryError

E = TypeVar('E', bound=Enum)


def format_int(name: str, value: int) -> str:
    """Render an integer parameter as plain base-10 digits"""
    # bool passes operator.index() but is never a meaningful page or rating
    if isinstance(value, bool):
        raise InvalidQueryError(f"'{name}' must be an integer, got bool")
    try:
        return str(operator.index(value))
    except TypeError:
        raise InvalidQueryError(f"'{name}' must be an integer, got {value!r}") from None


def coerce_choice(name: str, value: Union[str, E], enum_type: Type[E]) -> E:
    """Accept an enum member or its string value, reject anything else"""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise InvalidQueryError(f"'{name}' must be one of: {allowed}; got {value!r}") from None


def encode_params(params: Dict[str, str]) -> str:
    """URL-encode query parameters, sorted by key"""
    return urlencode(sorted(params.items()))
