from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from insertunit.compiler.compiled_query import CompiledQuery
from insertunit.errors import CompilationErrorDetails, InvalidBindingError

# ==================================================
# Binding Validation
# ==================================================

BindingValidateFn = Callable[[CompiledQuery], None]

DEFAULT_BINDING_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    str,
    bytes,
    bytearray,
    memoryview,
)


@dataclass(frozen=True)
class BindingValidator:
    """
    Rejects bound values whose type the execution engine cannot bind.
    """

    allowed_types: tuple[type, ...] = DEFAULT_BINDING_TYPES

    def __call__(self, compiled: CompiledQuery) -> None:
        for position, value in enumerate(compiled.params):
            if not isinstance(value, self.allowed_types):
                value_type = type(value).__name__
                raise InvalidBindingError(
                    CompilationErrorDetails(
                        operation="validate",
                        clause_kind="bindings",
                        reason=f"Unsupported binding type {value_type} at position {position}.",
                    ),
                    position=position,
                    value_type=value_type,
                )

    def with_types(self, *extra_types: type) -> BindingValidator:
        """
        Returns a validator that also accepts the given types.
        """
        return BindingValidator(allowed_types=self.allowed_types + tuple(extra_types))


DEFAULT_BINDING_VALIDATOR = BindingValidator()


def validate_bindings(compiled: CompiledQuery) -> None:
    """
    Validates bindings against the default SQLite-compatible type set.
    """
    DEFAULT_BINDING_VALIDATOR(compiled)
