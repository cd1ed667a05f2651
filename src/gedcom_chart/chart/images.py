"""
Image list sanitizing.

An individual's images survive only when the file has been supplied by the
caller (matched on bare file name) or when the image is a remote link with
a known image extension.
"""

from __future__ import annotations

import re
from typing import List, Mapping, Optional

from gedcom_chart.chart.models import ChartData, ChartImage, ChartIndividual
from gedcom_chart.logging import get_logger

log = get_logger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".png", ".gif")

_FILE_NAME_RE = re.compile(r"[^/\\]*$")


def file_name(url: str) -> str:
    """Last path segment of a URL or path, splitting on '/' and '\\'."""
    return _FILE_NAME_RE.search(url).group(0)


def is_image_file(name: str) -> bool:
    """Return True if the given file name has a known image extension."""
    return name.lower().endswith(IMAGE_EXTENSIONS)


def filter_image(indi: ChartIndividual, images: Mapping[str, str]) -> ChartIndividual:
    """
    Remove images that are neither supplied in `images` nor HTTP links to a
    known image type. Supplied images have their url replaced.
    Does not modify the input.
    """
    if not indi.get("images"):
        return indi

    kept: List[ChartImage] = []
    for image in indi["images"]:
        url = image["url"]
        name = file_name(url)
        if name in images:
            replacement: ChartImage = {"url": images[name]}
            if "title" in image:
                replacement["title"] = image["title"]
            kept.append(replacement)
        elif url.startswith("http") and is_image_file(url):
            kept.append(image)
        else:
            log.debug("Dropping image %r of individual %s", url, indi.get("id"))

    return {**indi, "images": kept}


def filter_images(chart_data: ChartData, images: Optional[Mapping[str, str]] = None) -> ChartData:
    """
    Apply filter_image() to every individual.
    Does not modify the input; families are passed through untouched.

    Args:
        images: Map from file name to image URL, used to pass in image files
            that were loaded alongside the GEDCOM text.
    """
    images = images or {}
    individuals = [filter_image(indi, images) for indi in chart_data["individuals"]]
    return {**chart_data, "individuals": individuals}
