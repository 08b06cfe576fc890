from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    allow_multiple_pseudo_elements: bool = False  # CSS allows one per compound selector
