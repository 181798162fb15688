"""
Shared failure containment for demo steps.

Every step has the same shape: attempt one driver call, log a status line on
success, or log the exception and hand back a failed result. Nothing is
retried and nothing is re-raised, so a failed step never stops later ones.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from atlas_crud.domain.models import OperationResult
from atlas_crud.utils.logging import get_logger
from atlas_crud.utils.profiler import profile_block

log = get_logger(__name__)


async def run_step(
    operation: str,
    action: Callable[[], Awaitable[Any]],
    describe: Callable[[Any], str],
) -> OperationResult:
    """
    Run one step and convert its outcome into an OperationResult.

    Parameters
    ----------
    operation : str
        Short step name (e.g. "create"), used in logs and on the result.
    action : callable
        Zero-argument coroutine factory performing the driver call and
        returning the step's value.
    describe : callable
        Builds the human-readable status line from the value.
    """
    value: Any = None
    message = ""
    failure: Optional[Exception] = None

    with profile_block(operation) as stats:
        try:
            value = await action()
            message = describe(value)
        except Exception as exc:  # noqa: BLE001 - each step contains its own failures
            failure = exc

    duration = round(stats.duration_seconds, 4)
    if failure is not None:
        log.error(
            f"[{operation.upper()} FAILED] {failure}",
            exc_info=failure,
            extra={"operation": operation, "error_type": type(failure).__name__},
        )
        return OperationResult(
            operation=operation,
            ok=False,
            message=f"{operation} failed: {failure}",
            error=str(failure),
            error_type=type(failure).__name__,
            duration_seconds=duration,
        )

    log.info(message, extra={"operation": operation, "duration_seconds": duration})
    return OperationResult(
        operation=operation,
        ok=True,
        value=value,
        message=message,
        duration_seconds=duration,
    )


__all__ = ["run_step"]
