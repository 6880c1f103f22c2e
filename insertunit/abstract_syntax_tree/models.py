from abc import ABC
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

# ==================================================
# Type aliases
# ==================================================

Row = Mapping[str, Any]
RowValues = Row | Iterable[Row]

# ==================================================
# Base classes
# ==================================================
@dataclass
class ASTNode(ABC):
    """
    A generic AST node. All specific AST node types will inherit from this base class.
    """
    pass

@dataclass
class InsertClauseNode(ASTNode):
    """
    A base class for the INSERT clause descriptors.
    """
    pass

# ==================================================
# Clause descriptors
# ==================================================

@dataclass
class RawInsertClauseNode(InsertClauseNode):
    """
    Represents a hand-written INSERT statement and its positional bindings.
    The SQL text is passed through verbatim.
    """
    sql: str
    bindings: Sequence[Any] | None = None

@dataclass
class RuleInsertClauseNode(InsertClauseNode):
    """
    Represents an INSERT built from a target table and one or many row mappings.
    """
    table: str
    values: RowValues
