from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from insertunit.errors import InvalidIdentifierError, make_error

# ==================================================
# Identifier Quoting
# ==================================================

IdentifierQuoteFn = Callable[[str], str]


@dataclass(frozen=True)
class IdentifierQuoter:
    """
    Wraps identifiers in dialect quote characters.

    The closing quote character is escaped by doubling it, so an identifier can
    never terminate its own quoting.
    """

    open_char: str = '"'
    close_char: str = '"'

    def __call__(self, identifier: str) -> str:
        if not isinstance(identifier, str):
            raise make_error(
                InvalidIdentifierError,
                operation="quote",
                clause_kind="rule",
                reason=f"Identifier must be a string, got {type(identifier).__name__}.",
            )
        if not identifier:
            raise make_error(
                InvalidIdentifierError,
                operation="quote",
                clause_kind="rule",
                reason="Identifier cannot be empty.",
            )
        if "\x00" in identifier:
            raise make_error(
                InvalidIdentifierError,
                operation="quote",
                clause_kind="rule",
                reason=f"Identifier {identifier!r} contains a NUL character.",
            )
        escaped = identifier.replace(self.close_char, self.close_char * 2)
        return f"{self.open_char}{escaped}{self.close_char}"


ANSI_QUOTER = IdentifierQuoter('"', '"')
MYSQL_QUOTER = IdentifierQuoter("`", "`")
MSSQL_QUOTER = IdentifierQuoter("[", "]")


def quote_identifier(identifier: str) -> str:
    """
    Quotes an identifier with ANSI double quotes (SQLite, PostgreSQL).
    """
    return ANSI_QUOTER(identifier)
