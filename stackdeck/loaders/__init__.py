"""Loaders for declarative card pool definitions."""

from .json_loader import (
    load_card_sources,
    load_pool_from_json,
    merge_card_sources,
    parse_pool_dict,
    validate_pool_dict,
    validate_pool_file,
)

__all__ = [
    "load_card_sources",
    "load_pool_from_json",
    "merge_card_sources",
    "parse_pool_dict",
    "validate_pool_dict",
    "validate_pool_file",
]
