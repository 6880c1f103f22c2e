from dataclasses import dataclass
from datetime import datetime, timezone
import itertools
import time
from typing import Any, Iterable, Mapping, Sequence, Sized

from insertunit.abstract_syntax_tree.models import (
    InsertClauseNode,
    RawInsertClauseNode,
    Row,
    RowValues,
    RuleInsertClauseNode,
)
from insertunit.compiler.bindings import BindingValidateFn, validate_bindings
from insertunit.compiler.compiled_query import PLACEHOLDER, CompiledQuery
from insertunit.compiler.quoting import IdentifierQuoteFn, quote_identifier
from insertunit.compiler.settings import MAX_BATCH_SIZE, CompilerSettings
from insertunit.errors import (
    CompilationErrorDetails,
    InvalidInputError,
    LimitExceededError,
    UnsupportedOperationError,
    make_error,
)
from insertunit.observability import CompileEvent, ObservabilitySettings
from insertunit.traversal.visitor_pattern import Visitor

__all__ = ["InsertCompiler", "compile_insert", "MAX_BATCH_SIZE"]


@dataclass(frozen=True)
class _CompiledClause:
    compiled: CompiledQuery
    row_count: int | None = None
    column_count: int | None = None


# ==================================================
# INSERT Clause Compiler
# ==================================================

class InsertCompiler(Visitor):
    """
    A visitor that compiles INSERT clause descriptors into a single parameterized
    statement and its ordered bindings.

    Placeholders are emitted row by row, and within each row in sorted column
    order. Bindings are collected in exactly the same order, so the i-th ``?``
    in the SQL text is always satisfied by the i-th binding.

    The compiler holds only its collaborators and settings. All per-call state is
    local, so one instance may be shared between threads.
    """

    def __init__(
        self,
        quoter: IdentifierQuoteFn | None = None,
        validator: BindingValidateFn | None = None,
        settings: CompilerSettings | None = None,
        observability_settings: ObservabilitySettings | None = None,
    ) -> None:
        self.quoter = quoter or quote_identifier
        self.validator = validator or validate_bindings
        self.settings = settings or CompilerSettings()
        self.observability_settings = observability_settings or ObservabilitySettings()

    def compile(self, clauses: Sequence[InsertClauseNode]) -> CompiledQuery:
        """
        The main entry point for compiling INSERT clauses.
        Zero clauses compile to an empty statement; more than one is rejected.
        """
        started_at = time.perf_counter()
        try:
            result = self._compile_clauses(clauses)
        except Exception as exc:
            try:
                self._emit_compile_event(
                    clauses,
                    started_at=started_at,
                    success=False,
                    error_type=exc.__class__.__name__,
                    error_message=str(exc),
                )
            except Exception:
                # the compile error wins; the observer error stays as its __context__
                raise exc
            raise
        self._emit_compile_event(clauses, started_at=started_at, success=True, result=result)
        return result.compiled

    def _compile_clauses(self, clauses: Sequence[InsertClauseNode]) -> _CompiledClause:
        if len(clauses) == 0:
            return _CompiledClause(compiled=CompiledQuery(sql="", params=[]))

        if len(clauses) > 1:
            raise make_error(
                UnsupportedOperationError,
                operation="compile",
                clause_kind="multiple",
                reason="Multiple INSERT clauses are not supported.",
            )

        result: _CompiledClause = self.visit(clauses[0])
        if result.compiled.params:
            self.validator(result.compiled)
        return result

    # --------------------------------------------------
    # Clause Nodes
    # --------------------------------------------------

    def visit_RawInsertClauseNode(self, node: RawInsertClauseNode) -> _CompiledClause:
        """
        Passes raw SQL through verbatim, appending its bindings in the given order.
        """
        params: list[Any] = []
        if node.bindings is not None:
            if isinstance(node.bindings, (str, bytes, bytearray, Mapping)):
                raise make_error(
                    InvalidInputError,
                    operation="compile",
                    clause_kind="raw",
                    reason=f"Raw bindings must be a sequence of values, got {type(node.bindings).__name__}.",
                )
            params.extend(node.bindings)
        return _CompiledClause(compiled=CompiledQuery(sql=node.sql, params=params))

    def visit_RuleInsertClauseNode(self, node: RuleInsertClauseNode) -> _CompiledClause:
        """
        Compiles a table plus row mappings into a multi-row INSERT.
        Columns are the sorted union of all row keys; absent keys bind as NULL.
        """
        rows = self._normalize_rows(node.values)
        if not rows:
            raise make_error(
                InvalidInputError,
                operation="compile",
                clause_kind="rule",
                reason="No values provided for INSERT.",
            )

        limit = self.settings.max_batch_size
        if len(rows) > limit:
            # sized inputs report their full length; iterators stop at limit + 1
            count = len(node.values) if isinstance(node.values, Sized) else len(rows)
            raise LimitExceededError(
                CompilationErrorDetails(
                    operation="compile",
                    clause_kind="rule",
                    reason=f"Batch size {count} exceeds maximum limit of {limit}.",
                ),
                count=count,
                limit=limit,
            )

        columns = self._collect_columns(rows)
        if not columns:
            raise make_error(
                InvalidInputError,
                operation="compile",
                clause_kind="rule",
                reason="No columns provided for INSERT.",
            )

        table = self.quoter(node.table)
        quoted_columns = [self.quoter(col) for col in columns]

        row_placeholder = f"({', '.join([PLACEHOLDER] * len(columns))})"
        placeholders = ", ".join([row_placeholder] * len(rows))

        params: list[Any] = []
        for row in rows:
            for col in columns:
                params.append(row[col] if col in row else None)

        sql = f"INSERT INTO {table} ({', '.join(quoted_columns)}) VALUES {placeholders}"
        return _CompiledClause(
            compiled=CompiledQuery(sql=sql, params=params),
            row_count=len(rows),
            column_count=len(columns),
        )

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _normalize_rows(self, values: RowValues) -> list[Row]:
        if isinstance(values, Mapping):
            return [values]
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise make_error(
                InvalidInputError,
                operation="compile",
                clause_kind="rule",
                reason=f"Insert values must be a mapping or a sequence of mappings, got {type(values).__name__}.",
            )
        # one row past the ceiling is enough to reject an oversized batch
        return list(itertools.islice(values, self.settings.max_batch_size + 1))

    def _collect_columns(self, rows: list[Row]) -> list[str]:
        columns: set[str] = set()
        for index, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise make_error(
                    InvalidInputError,
                    operation="compile",
                    clause_kind="rule",
                    reason=f"Insert row {index} must be a mapping, got {type(row).__name__}.",
                )
            for key in row:
                if not isinstance(key, str):
                    raise make_error(
                        InvalidInputError,
                        operation="compile",
                        clause_kind="rule",
                        reason=f"Insert row {index} has a non-string column name {key!r}.",
                    )
                columns.add(key)
        return sorted(columns)

    def _emit_compile_event(
        self,
        clauses: Sequence[InsertClauseNode],
        *,
        started_at: float,
        success: bool,
        result: _CompiledClause | None = None,
        error_type: str | None = None,
        error_message: str | None = None,
    ) -> None:
        settings = self.observability_settings
        if settings.event_observer is None:
            return

        clause_kind = "none"
        table: str | None = None
        if len(clauses) > 1:
            clause_kind = "multiple"
        elif len(clauses) == 1:
            node = clauses[0]
            if isinstance(node, RawInsertClauseNode):
                clause_kind = "raw"
            elif isinstance(node, RuleInsertClauseNode):
                clause_kind = "rule"
                table = node.table
            else:
                clause_kind = "unknown"

        event = CompileEvent(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event="compile.end",
            compiler=self.__class__.__name__,
            clause_kind=clause_kind,
            success=success,
            metadata=dict(settings.metadata),
            table=table,
            row_count=result.row_count if result else None,
            column_count=result.column_count if result else None,
            param_count=len(result.compiled.params) if result else None,
            duration_ms=(time.perf_counter() - started_at) * 1000,
            error_type=error_type,
            error_message=error_message,
        )
        settings.event_observer(event)


def compile_insert(
    clauses: Sequence[InsertClauseNode],
    *,
    quoter: IdentifierQuoteFn | None = None,
    validator: BindingValidateFn | None = None,
    settings: CompilerSettings | None = None,
    observability_settings: ObservabilitySettings | None = None,
) -> CompiledQuery:
    """
    Compiles INSERT clause descriptors with a one-off InsertCompiler.
    """
    compiler = InsertCompiler(
        quoter=quoter,
        validator=validator,
        settings=settings,
        observability_settings=observability_settings,
    )
    return compiler.compile(clauses)
