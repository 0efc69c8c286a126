"""Configuration for the max-flow engine."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Settings applied by ``MaxFlowEngine`` on every computation."""

    # Check matrix shape, entries and source/sink indices before computing
    validate_input: bool = True

    # Abort with RuntimeError after this many augmenting paths (None: no limit)
    max_augmentations: Optional[int] = None

    # Emit one DEBUG record per augmenting path
    log_paths: bool = True

    def __post_init__(self) -> None:
        if self.max_augmentations is not None and self.max_augmentations < 0:
            raise ValueError(
                f"max_augmentations must be non-negative, got {self.max_augmentations}"
            )


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
