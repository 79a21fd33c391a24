"""
Codec configuration.

Defaults are safe for untrusted input; ``from_env`` lets deployments raise
or lower them without code changes.
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True)
class CanonicalConfig:
    # Arrays and objects nested deeper than this are rejected
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @classmethod
    def from_env(cls) -> "CanonicalConfig":
        """Build a config from JCS_* environment variables."""
        return cls(max_depth=int(os.getenv("JCS_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))))


DEFAULT_CONFIG = CanonicalConfig()
