"""Result of one pipeline step."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class FilterResult:
    """One filter applied, one file written."""

    name: str
    output_path: Path
    shape: Tuple[int, ...]
    elapsed_ms: float

    # Only set when output and source have the same shape
    psnr: Optional[float] = None
    ssim: Optional[float] = None
