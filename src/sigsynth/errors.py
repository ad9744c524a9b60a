"""Error kinds raised by sources, filters, interpolators and generators."""

from __future__ import annotations


class SignalError(Exception):
    """Base class for all sigsynth failures.

    Carries a machine-readable ``kind`` plus a ``context`` list that grows
    as the error propagates outward (source index, then signal time, ...).
    """

    kind: str = "signal_error"

    def __init__(self, message: str, *, context: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = list(context or [])

    def add_context(self, note: str) -> SignalError:
        """Append a propagation note and return self, for ``raise err.add_context(...)``."""
        self.context.append(note)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} ({'; '.join(self.context)})"


class StaleAccess(SignalError, IndexError):
    """Requested index has been evicted from a source's retention window."""

    kind = "stale_access"

    def __init__(
        self, message: str, *, index: int | None = None, context: list[str] | None = None
    ) -> None:
        super().__init__(message, context=context)
        self.index = index


class IndexOutOfRange(StaleAccess):
    """Requested index lies past the end of a finite data array."""

    kind = "index_out_of_range"


class UndefinedParameter(SignalError, ValueError):
    """Unsupported configuration value (exponent, interpolator code, ...)."""

    kind = "undefined_parameter"

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        value: object = None,
        context: list[str] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.field_name = field_name
        self.value = value


class CausalityViolation(SignalError, RuntimeError):
    """A generation rule read its own index, or a later one, from its own cache."""

    kind = "causality_violation"

    def __init__(
        self, message: str, *, index: int | None = None, context: list[str] | None = None
    ) -> None:
        super().__init__(message, context=context)
        self.index = index
