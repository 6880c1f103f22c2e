from __future__ import annotations

from dataclasses import dataclass

MAX_BATCH_SIZE = 10000

# ==================================================
# Compiler Settings
# ==================================================


@dataclass(frozen=True)
class CompilerSettings:
    """
    Compile-time limits for INSERT clauses.
    """

    max_batch_size: int = MAX_BATCH_SIZE

    def __post_init__(self) -> None:
        if self.max_batch_size < 1:
            raise ValueError("max_batch_size must be >= 1")
        if self.max_batch_size > MAX_BATCH_SIZE:
            raise ValueError(f"max_batch_size must be <= {MAX_BATCH_SIZE}")
