"""Fail-fast assertion primitive used while schemas are being defined."""

from typing import Any

from loguru import logger


class InvariantError(AssertionError):
    """Raised when a schema-authoring invariant does not hold."""


def invariant(condition: Any, message: str) -> None:
    """Abort with ``message`` when ``condition`` is falsy.

    Invariants guard schema construction, not runtime data. A failure means
    the schema itself is wrong and is never meant to be caught and recovered
    from.

    Args:
        condition: Value tested for truthiness.
        message: Description of the violated invariant.

    Raises:
        InvariantError: If ``condition`` is falsy.
    """
    if not condition:
        logger.error("Invariant violation: {}", message)
        raise InvariantError(message)
