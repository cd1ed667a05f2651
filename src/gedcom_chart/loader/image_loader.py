"""
Image Loader

Reads image files shipped alongside a GEDCOM file (a directory or a zip
archive) into a map from bare file name to a ``data:`` URL. The map is what
convert_gedcom() uses to substitute local images for the paths recorded in
the GEDCOM text.
"""

from __future__ import annotations

import base64
import mimetypes
import zipfile
from pathlib import Path, PurePosixPath
from typing import Dict, Union

from gedcom_chart.chart.images import is_image_file
from gedcom_chart.core.exceptions import ImageSourceError
from gedcom_chart.logging import get_logger

log = get_logger(__name__)


def to_data_url(name: str, content: bytes) -> str:
    mime = mimetypes.guess_type(name)[0] or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


def _load_from_zip(path: Path) -> Dict[str, str]:
    images: Dict[str, str] = {}
    with zipfile.ZipFile(path) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            name = PurePosixPath(info.filename).name
            if not is_image_file(name):
                continue
            images[name] = to_data_url(name, archive.read(info))
    return images


def _load_from_dir(path: Path) -> Dict[str, str]:
    images: Dict[str, str] = {}
    for file_path in sorted(path.rglob("*")):
        if file_path.is_file() and is_image_file(file_path.name):
            images[file_path.name] = to_data_url(file_path.name, file_path.read_bytes())
    return images


def load_images(path: Union[str, Path, None]) -> Dict[str, str]:
    """
    Load image files from a directory (recursively) or a zip archive.

    Returns an empty map when `path` is None. When two files share a name,
    the one read last wins.

    Raises:
        FileNotFoundError: if `path` does not exist.
        ImageSourceError: if `path` is a file but not a zip archive.
    """
    if path is None:
        return {}

    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(f"Image source not found: {src}")

    if src.is_dir():
        images = _load_from_dir(src)
    elif zipfile.is_zipfile(src):
        images = _load_from_zip(src)
    else:
        raise ImageSourceError(f"Image source is neither a directory nor a zip archive: {src}")

    log.info("Loaded %d image(s) from %s", len(images), src)
    return images
