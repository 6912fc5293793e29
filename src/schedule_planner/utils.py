"""Helpers for list-valued catalog fields."""

import re
from typing import Any

import pandas as pd

# Slots and rooms within one cell: "2M1 2M2", "2M1;2M2", "2M1, 2M2"
_LIST_SEPARATOR = re.compile(r"[\s,;]+")


def _is_blank(value: Any) -> bool:
    return value is None or (not isinstance(value, str) and pd.isna(value))


def split_cell(value: Any) -> list[str]:
    """Split a list-valued cell into its items."""
    if _is_blank(value):
        return []
    return [item for item in _LIST_SEPARATOR.split(str(value).strip()) if item]


def split_names(value: Any) -> list[str]:
    """Split a cell of names; names contain spaces, so only ';' separates them."""
    if _is_blank(value):
        return []
    return [item.strip() for item in str(value).split(";") if item.strip()]
