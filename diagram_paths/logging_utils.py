from __future__ import annotations

import inspect
import logging
import reprlib
from functools import partial, wraps
from typing import Any, Callable, Iterable, Iterator, MutableMapping, Optional, Sequence, Set, Tuple, TypeVar, Union, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxset = 8


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Install a basic stderr handler for the ``diagram_paths`` loggers."""

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _summarise(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    summary = getattr(value, "log_summary", None)
    if callable(summary) and not inspect.isclass(value):
        return str(summary())

    if isinstance(value, np.ndarray):
        if value.size <= max_items * max_items:
            return f"ndarray(shape={tuple(value.shape)}, values={value.tolist()!r})"
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, (frozenset, set)):
        return f"{type(value).__name__}(size={len(value)})"

    if isinstance(value, (list, tuple)):
        items = [_summarise(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} total)")
        if isinstance(value, tuple):
            return "(" + ", ".join(items) + ")"
        return "[" + ", ".join(items) + "]"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_summarise(arg) for arg in args]
    parts.extend(f"{key}={_summarise(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs each call as one DEBUG line.

    A successful call logs ``name(args) -> result``.  A failing call logs
    ``name(args) raised Error: message`` and the exception propagates.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            call = f"{label}({_format_arguments(args, kwargs)})"
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s: %s", call, type(exc).__name__, exc)
                raise
            logger.debug("%s -> %s", call, _summarise(result) if log_result else "done")
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _trace_targets(
    namespace: MutableMapping[str, Any], module_name: Optional[str], wrap_methods: bool
) -> Iterator[Tuple[str, Callable[..., Any], Callable[[Any], None]]]:
    """Yield ``(label, function, install)`` for every traceable callable.

    Module-level functions and plain methods of module-level classes are
    covered; dunder methods and properties are left alone.
    """

    def local(value: Any) -> bool:
        return getattr(value, "__module__", None) == module_name

    for key, value in list(namespace.items()):
        if inspect.isfunction(value) and local(value):
            yield key, value, partial(namespace.__setitem__, key)
        elif wrap_methods and inspect.isclass(value) and local(value):
            for attr, member in list(vars(value).items()):
                if attr.startswith("__") and attr.endswith("__"):
                    continue
                if inspect.isfunction(member) and local(member):
                    yield f"{value.__name__}.{attr}", member, partial(setattr, value, attr)


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Trace the functions and methods defined in ``namespace`` at DEBUG level.

    ``skip`` holds names (``func`` or ``Class.method``) to leave untouched,
    typically hot helpers and ``log_summary`` itself.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or ())

    for label, func, install in _trace_targets(namespace, module_name, wrap_methods):
        if label in skip_set or label.rsplit(".", 1)[-1] in skip_set:
            continue
        install(debug_log_call(logger, name=label)(func))


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "debug_log_call",
    "apply_debug_logging",
]
