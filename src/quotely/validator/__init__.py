"""Quotely field validation module.

Exports the limits configuration and the per-field validation rules.
"""
from __future__ import annotations

from quotely.validator.rules import (
    DEFAULT_LIMITS,
    NAME_PATTERN,
    FieldLimits,
    check_item_capacity,
    check_item_exists,
    is_valid_name,
    parse_price,
    parse_quantity,
    parse_tax_rate,
    validate_company_name,
    validate_customer_name,
    validate_item_name,
    validate_quote_name,
)

__all__ = [
    "FieldLimits",
    "DEFAULT_LIMITS",
    "NAME_PATTERN",
    "is_valid_name",
    "validate_quote_name",
    "validate_customer_name",
    "validate_company_name",
    "validate_item_name",
    "parse_price",
    "parse_quantity",
    "parse_tax_rate",
    "check_item_capacity",
    "check_item_exists",
]
