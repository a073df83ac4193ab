"""Parameters for the windowed filters."""

from dataclasses import dataclass

from utils.constants import DIFFERENCE_OF_GAUSSIANS_THRESHOLD
from utils.errors import InvalidParameterError


@dataclass
class DogParams:
    """Difference-of-Gaussians parameters (box blur sizes)."""

    small_size: int = 5
    large_size: int = 11
    threshold: float = DIFFERENCE_OF_GAUSSIANS_THRESHOLD

    def __post_init__(self):
        if not (1 <= self.small_size < self.large_size):
            raise InvalidParameterError(
                f"Need 1 <= small_size < large_size, got {self.small_size}, {self.large_size}"
            )
        if self.threshold < 0:
            raise InvalidParameterError(f"Threshold must be >= 0, got {self.threshold}")


@dataclass
class KuwaharaParams:
    """Kuwahara window radius; each quadrant is (radius+1)^2 pixels."""

    radius: int = 4

    def __post_init__(self):
        if self.radius < 0:
            raise InvalidParameterError(f"Radius must be >= 0, got {self.radius}")


@dataclass
class DitherParams:
    """Ordered dithering parameters."""

    matrix_size: int = 4
    levels: int = 2
    spread: float = 1.0

    def __post_init__(self):
        if self.matrix_size not in [2, 4, 8]:
            raise InvalidParameterError(f"Bayer matrix size must be 2, 4, or 8, got {self.matrix_size}")
        if self.levels < 2:
            raise InvalidParameterError(f"Need at least 2 levels, got {self.levels}")
