"""
Sketch configuration

Settings shared by a piece: random seed, default palette, extra palette
file and logging options. Usually loaded from a YAML file:

    seed: 42
    default_palette: neon
    palette_file: palettes.yaml
    log_level: DEBUG
"""

import numpy as np
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .core.palette import PALETTES, Palette, load_palettes
from .procedural.particles import ParticleOptions


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class SketchConfig:
    """Configuration for a sketch"""
    seed: Optional[int] = None
    default_palette: str = "cosmic"
    palette_file: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SketchConfig':
        """Create from dictionary, ignoring unknown keys"""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    def make_rng(self) -> np.random.Generator:
        """Generator seeded from this config (unseeded if seed is None)"""
        return np.random.default_rng(self.seed)

    def palettes(self) -> Mapping[str, Palette]:
        """Built-in palettes, merged with palette_file when one is set"""
        if self.palette_file is None:
            return PALETTES
        return load_palettes(self.palette_file)

    def particle_options(self, **overrides) -> ParticleOptions:
        """ParticleOptions drawing colors from default_palette unless overridden"""
        overrides.setdefault('palette', self.default_palette)
        return ParticleOptions(**overrides)


def load_config(path: Union[str, Path]) -> SketchConfig:
    """
    Load a SketchConfig from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document isn't a mapping
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return SketchConfig()
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping, got {type(data).__name__}")

    return SketchConfig.from_dict(data)
