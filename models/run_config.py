"""Pipeline run configuration."""

from dataclasses import dataclass
from pathlib import Path

from utils.errors import InvalidParameterError


@dataclass
class RunConfig:
    """Where sample images come from and where results go."""

    logo_path: Path = Path('images/logo.png')
    photo_path: Path = Path('images/photo.jpg')
    output_dir: Path = Path('output')
    seed: int = 0
    synthetic: bool = False

    def __post_init__(self):
        self.logo_path = Path(self.logo_path)
        self.photo_path = Path(self.photo_path)
        self.output_dir = Path(self.output_dir)
        if self.seed < 0:
            raise InvalidParameterError(f"Seed must be >= 0, got {self.seed}")
