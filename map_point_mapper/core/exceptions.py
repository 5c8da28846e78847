"""Errors raised while turning request text into framed map lines.

A request passes through ingress, parsing, framing and serialisation.
Each of those stages raises a ``MapperError`` subclass tagged with the
stage name and a stable code, and the HTTP handlers turn it into the
``{"error": {...}}`` body via ``to_error_dict()``.

Categories
----------
- ``ContractError``: the request itself is unusable (bad JSON, missing
  ``text``, unknown order label, oversized body).  Answered with 400/413.
- ``ValidationError``: the request is well formed but its text yields
  nothing drawable, or the lines cannot be framed.  Answered with 422.

Nothing in the mapper does I/O, so no error is retryable; the
``retryable`` flag is carried for callers that wrap the handlers.
"""

from __future__ import annotations


class MapperError(Exception):
    """Root of every map-point-mapper error.

    Attributes:
        message: Text shown to the user (e.g. ``"Unable to parse input string"``).
        stage: Where it failed: ``"ingress"``, ``"parse_geometry"``,
            ``"region"``, ``"serialize"``, ``"config"`` or
            ``"model_validation"``.
        code: Stable upper-case code, e.g. ``"INPUT_TOO_LARGE"``.
        retryable: Whether resending the same request could succeed.
        correlation_id: Value of the caller's ``x-correlation-id`` header.
    """

    # Subclasses set these instead of passing stage/code at every raise
    default_stage: str = ""
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Category from the concrete class, falling back to ``retryable``."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Body of the ``error`` key in HTTP error responses."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class ValidationError(MapperError):
    """Text that parses to nothing, or lines that cannot be framed."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(MapperError):
    """A request body that does not match ``ParseGeometryRequest``."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
