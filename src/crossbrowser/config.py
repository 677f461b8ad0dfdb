"""
Configuration objects.

RenderOptions is the evaluation context carried from the host into
value rendering. DatasetConfig says where the capability data lives.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

DATA_PATH_ENV = "CROSSBROWSER_DATA_PATH"
DEFAULT_DATA_PATH = os.path.join(os.path.dirname(__file__), "data", "caniuse.yaml")


class OutputStyle(Enum):
    """How values are stringified."""
    EXPANDED = "expanded"
    COMPRESSED = "compressed"


@dataclass(frozen=True)
class RenderOptions:
    style: OutputStyle = OutputStyle.EXPANDED
    precision: int = 5

    @property
    def compressed(self) -> bool:
        return self.style is OutputStyle.COMPRESSED


DEFAULT_OPTIONS = RenderOptions()


@dataclass(frozen=True)
class DatasetConfig:
    data_path: str = DEFAULT_DATA_PATH

    @classmethod
    def from_env(cls) -> DatasetConfig:
        """Build a config, letting CROSSBROWSER_DATA_PATH override the bundled data."""
        path = os.getenv(DATA_PATH_ENV)
        if path and path.strip():
            return cls(data_path=path.strip())
        return cls()
