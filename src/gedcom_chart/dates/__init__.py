"""GEDCOM date parsing into chart date structures."""

from .normalizer import parse_date, parse_simple_date

__all__ = ["parse_date", "parse_simple_date"]
