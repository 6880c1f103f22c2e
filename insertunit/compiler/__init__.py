from insertunit.compiler.compiled_query import CompiledQuery
from insertunit.compiler.insert_compiler import InsertCompiler, compile_insert
from insertunit.compiler.quoting import (
    ANSI_QUOTER,
    MSSQL_QUOTER,
    MYSQL_QUOTER,
    IdentifierQuoter,
    quote_identifier,
)
from insertunit.compiler.bindings import BindingValidator, validate_bindings
from insertunit.compiler.settings import MAX_BATCH_SIZE, CompilerSettings

__all__ = [
    "CompiledQuery",
    "InsertCompiler",
    "compile_insert",
    "IdentifierQuoter",
    "ANSI_QUOTER",
    "MYSQL_QUOTER",
    "MSSQL_QUOTER",
    "quote_identifier",
    "BindingValidator",
    "validate_bindings",
    "CompilerSettings",
    "MAX_BATCH_SIZE",
]
