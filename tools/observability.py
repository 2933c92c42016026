"""Timing and structured logging around engine operations."""

from __future__ import annotations

import dataclasses
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from health_app.logging_config import ensure_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

MAX_PREVIEW_KEYS = 6


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _summarize(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return f"<{len(value)} items>"
    if isinstance(value, BaseModel) or (dataclasses.is_dataclass(value) and not isinstance(value, type)):
        return type(value).__name__
    return value


def _argument_preview(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """First few keyword arguments with sequences reduced to their length."""

    preview = {key: _summarize(value) for key, value in list(kwargs.items())[:MAX_PREVIEW_KEYS]}
    if len(kwargs) > MAX_PREVIEW_KEYS:
        preview["truncated"] = True
    return preview


def instrument_operation(
    operation_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion (with duration) and failure of the wrapped callable.

    With ``input_model`` the keyword arguments are validated first; a
    validation error goes to ``on_validation_error`` when given and is
    re-raised otherwise.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()

            if input_model is not None:
                try:
                    kwargs = input_model.model_validate(kwargs).model_dump()
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "operation_input_rejected",
                        operation=operation_name,
                        correlation_id=correlation_id,
                        errors=exc.errors(include_url=False, include_context=False),
                    )
                    if on_validation_error is None:
                        raise
                    return on_validation_error(exc)

            started = time.perf_counter()
            log_event(
                LOGGER,
                logging.DEBUG,
                "operation_started",
                operation=operation_name,
                correlation_id=correlation_id,
                arguments=_argument_preview(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "operation_failed",
                    operation=operation_name,
                    correlation_id=correlation_id,
                    duration_ms=_elapsed_ms(started),
                    exc_info=True,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                "operation_completed",
                operation=operation_name,
                correlation_id=correlation_id,
                duration_ms=_elapsed_ms(started),
                result_type=type(result).__name__,
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
