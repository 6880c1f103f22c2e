from __future__ import annotations

from dataclasses import dataclass


# ==================================================
# Compilation Errors
# ==================================================


@dataclass(slots=True)
class CompilationErrorDetails:
    """
    Structured metadata for compilation errors.
    """

    operation: str
    clause_kind: str
    reason: str


class CompilationError(ValueError):
    """
    Base compilation error type. Every failure aborts the whole compile call.
    """

    def __init__(self, details: CompilationErrorDetails) -> None:
        self.details = details
        super().__init__(f"[insert:{details.operation}] {self.__class__.__name__}: {details.reason}")


class UnsupportedOperationError(CompilationError):
    pass


class InvalidInputError(CompilationError):
    pass


class InvalidIdentifierError(InvalidInputError):
    pass


class LimitExceededError(CompilationError):
    """
    Raised when a rule carries more rows than the batch ceiling allows.
    """

    def __init__(self, details: CompilationErrorDetails, *, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(details)


class InvalidBindingError(CompilationError):
    """
    Raised by binding validators for the first value of an unsupported type.
    """

    def __init__(self, details: CompilationErrorDetails, *, position: int, value_type: str) -> None:
        self.position = position
        self.value_type = value_type
        super().__init__(details)


def make_error(
    error_cls: type[CompilationError],
    *,
    operation: str,
    clause_kind: str,
    reason: str,
) -> CompilationError:
    """
    Builds a plain compilation error from its operation context.
    """
    return error_cls(CompilationErrorDetails(operation=operation, clause_kind=clause_kind, reason=reason))
