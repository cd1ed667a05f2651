"""
Chart data: conversion from GEDCOM entries, sibling ordering, image
sanitizing and start-point selection.
"""

from __future__ import annotations

from .converter import gedcom_entries_to_json
from .images import IMAGE_EXTENSIONS, filter_image, filter_images, is_image_file
from .selection import Selection, get_selection
from .sorting import birth_dates_comparator, sort_children, sort_family_children

__all__ = [
    "IMAGE_EXTENSIONS",
    "Selection",
    "birth_dates_comparator",
    "filter_image",
    "filter_images",
    "gedcom_entries_to_json",
    "get_selection",
    "is_image_file",
    "sort_children",
    "sort_family_children",
]
