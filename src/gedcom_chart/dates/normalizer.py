# src/gedcom_chart/dates/normalizer.py

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Month and calendar helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

CALENDAR_ESCAPES = ("@#DGREGORIAN@", "@#DJULIAN@", "@#DHEBREW@", "@#DFRENCH R@")

CALENDAR_SUFFIXES = {"JULIAN", "OLD STYLE", "GREGORIAN", "NEW STYLE"}

# Qualifiers that keep a single date and are carried through as `qualifier`.
QUALIFIERS = {
    "ABT": "abt",
    "ABOUT": "abt",
    "CIRCA": "abt",
    "CAL": "cal",
    "EST": "est",
}

RANGE_STARTS = {"BET", "BETWEEN", "FROM", "AFT", "AFTER"}
RANGE_ENDS = {"AND", "TO"}
BEFORE = {"BEF", "BEFORE", "TO"}


def _strip_calendar(raw: str) -> str:
    """
    Remove GEDCOM calendar escapes ("@#DJULIAN@ ...") and a trailing
    "(Julian)"-style suffix.
    """
    s = raw.strip()
    for escape in CALENDAR_ESCAPES:
        s = s.replace(escape, " ")

    if s.endswith(")"):
        idx = s.rfind("(")
        if idx != -1 and s[idx + 1 : -1].strip().upper() in CALENDAR_SUFFIXES:
            s = s[:idx]

    return s.strip()


def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    # "1750/51" dual-dated years keep the first year.
    if "/" in token:
        token = token.split("/", 1)[0]
    if token.isdigit() and 1 <= len(token) <= 4:
        return int(token)
    return None


def parse_simple_date(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse a date with no range keywords into ``{day?, month?, year?}``.

    Supports '1900', 'JAN 1900' and '1 JAN 1900'. Returns None when the text
    does not match any of these forms.
    """
    tokens = [t for t in text.replace(",", " ").split() if t]

    if len(tokens) == 1:
        year = _parse_year(tokens[0])
        return {"year": year} if year is not None else None

    if len(tokens) == 2:
        mon = MONTHS.get(tokens[0].upper())
        year = _parse_year(tokens[1])
        if mon is not None and year is not None:
            return {"month": mon, "year": year}
        return None

    if len(tokens) == 3:
        day_token, mon_token, year_token = tokens
        mon = MONTHS.get(mon_token.upper())
        year = _parse_year(year_token)
        if day_token.isdigit() and mon is not None and year is not None:
            return {"day": int(day_token), "month": mon, "year": year}

    return None


def _parse_qualified(tokens: List[str]) -> Optional[Dict[str, Any]]:
    """Parse '[ABT|CAL|EST] <date>' into a chart date."""
    if not tokens:
        return None

    qualifier = QUALIFIERS.get(tokens[0].upper())
    rest = tokens[1:] if qualifier else tokens

    date = parse_simple_date(" ".join(rest))
    if date is None:
        return None
    if qualifier:
        date = {"qualifier": qualifier, **date}
    return date


def _split_on(tokens: List[str], separators: set) -> Optional[Tuple[List[str], List[str]]]:
    """
    Split tokens into (left, right) at the first separator token
    (case-insensitive). Returns None if no separator is found.
    """
    for i, t in enumerate(tokens):
        if t.upper() in separators:
            return tokens[:i], tokens[i + 1 :]
    return None


def _range(start: Optional[Dict[str, Any]], end: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    bounds = {}
    if start:
        bounds["from"] = start
    if end:
        bounds["to"] = end
    return {"dateRange": bounds} if bounds else None


def _parse_range(tokens: List[str]) -> Optional[Dict[str, Any]]:
    head = tokens[0].upper()
    rest = tokens[1:]

    if head in BEFORE:
        return _range(None, _parse_qualified(rest))

    if head in RANGE_STARTS:
        split = _split_on(rest, RANGE_ENDS)
        if split is None:
            # "AFT 1900" / "FROM 1900"; "BET 1900" without AND is malformed.
            if head in ("BET", "BETWEEN"):
                return None
            return _range(_parse_qualified(rest), None)
        left, right = split
        return _range(_parse_qualified(left), _parse_qualified(right))

    return None


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def parse_date(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parse a GEDCOM DATE value into a chart date structure.

    Returns exactly one of:

        {"date": {"qualifier"?, "day"?, "month"?, "year"?}}
        {"dateRange": {"from"?: date, "to"?: date}}
        {"date": {"text": raw}}           # unparseable input

    Examples:
        '1 JAN 1900'            -> {"date": {"day": 1, "month": 1, "year": 1900}}
        'ABT 1900'              -> {"date": {"qualifier": "abt", "year": 1900}}
        'BET 1890 AND 1900'     -> {"dateRange": {"from": {...}, "to": {...}}}
        'BEF 1900'              -> {"dateRange": {"to": {"year": 1900}}}
        'AFT 1900'              -> {"dateRange": {"from": {"year": 1900}}}
    """
    s = "" if raw is None else str(raw).strip()
    if not s:
        return {"date": {"text": s}}

    tokens = [t for t in _strip_calendar(s).replace(",", " ").split() if t]
    if not tokens:
        return {"date": {"text": s}}

    if tokens[0].upper() in RANGE_STARTS | BEFORE:
        parsed = _parse_range(tokens)
        if parsed is not None:
            return parsed
        return {"date": {"text": s}}

    date = _parse_qualified(tokens)
    if date is not None:
        return {"date": date}

    return {"date": {"text": s}}
