from dataclasses import dataclass, field
from typing import Any

PLACEHOLDER = "?"

# ==================================================
# Compiled Output
# ==================================================

@dataclass
class CompiledQuery:
    """
    Represents the result of the compilation process.
    The i-th placeholder in sql is satisfied by the i-th entry of params.
    """
    sql: str
    params: list[Any] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        """
        Plain count of ``?`` characters in the SQL text. A ``?`` inside a quoted
        identifier or string literal is counted too, so this only equals the
        number of bind markers when identifiers contain no ``?``.
        """
        return self.sql.count(PLACEHOLDER)
