from insertunit.abstract_syntax_tree.models import (
    InsertClauseNode,
    RawInsertClauseNode,
    RuleInsertClauseNode,
)
from insertunit.compiler import (
    ANSI_QUOTER,
    MAX_BATCH_SIZE,
    MSSQL_QUOTER,
    MYSQL_QUOTER,
    BindingValidator,
    CompiledQuery,
    CompilerSettings,
    IdentifierQuoter,
    InsertCompiler,
    compile_insert,
    quote_identifier,
    validate_bindings,
)
from insertunit.errors import (
    CompilationError,
    CompilationErrorDetails,
    InvalidBindingError,
    InvalidIdentifierError,
    InvalidInputError,
    LimitExceededError,
    UnsupportedOperationError,
)
from insertunit.observability import (
    CompileEvent,
    InMemoryMetricsAdapter,
    MetricPoint,
    ObservabilitySettings,
    compile_event_to_dict,
    compose_event_observers,
    make_json_event_logger,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InsertClauseNode",
    "RawInsertClauseNode",
    "RuleInsertClauseNode",
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
    "CompilationError",
    "CompilationErrorDetails",
    "UnsupportedOperationError",
    "InvalidInputError",
    "InvalidIdentifierError",
    "LimitExceededError",
    "InvalidBindingError",
    "ObservabilitySettings",
    "CompileEvent",
    "InMemoryMetricsAdapter",
    "MetricPoint",
    "compile_event_to_dict",
    "compose_event_observers",
    "make_json_event_logger",
]
