from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ConversionContext:
    """
    Shared pipeline context.
    This object is passed between the CLI and the pipeline.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    images_path: Optional[str] = None
    output_path: Optional[str] = None

    # Requested chart start point
    indi: Optional[str] = None
    generation: Optional[int] = None

    stats: Dict[str, Any] = field(default_factory=dict)

    # Indent file output with the configured width
    pretty: bool = False
