"""
Deprecation helpers for mas.

Usage:

    from mas_core.codebase.deprecation import deprecated

    @deprecated(
        message="Sorts in place.",
        since="0.2.0",
        alternative="mas_core.dag.order_sections",
        remove_in="0.4.0",
    )
    def sort_by_dag(report: Report) -> None:
        ...

The active behaviour comes from a process-wide DeprecationConfig. Library code
never reads the environment; front ends call

    set_deprecation_config(DeprecationConfig.from_env())

to honour these flags:

    MAS_DEPRECATION_MODE = "warn" | "error" | "silent"
        Default: "warn". Controls whether we warn, raise, or remain silent.

    MAS_DEPRECATION_VERBOSE = "0" | "1"
        Default: "0". If "1", also log the notice with its call site.

Each deprecated name is announced at most once per process.
"""

import inspect
import logging
import os
import warnings
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")

__all__ = [
    "deprecated",
    "emit_deprecation",
    "DeprecationConfig",
    "set_deprecation_config",
    "get_deprecation_config",
    "reset_emitted",
]

_LOGGER_NAME = "mas.deprecation"
_logger = logging.getLogger(_LOGGER_NAME)

_MODES = {"warn", "error", "silent"}


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DeprecationConfig:
    mode: str = "warn"  # "warn" | "error" | "silent"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "DeprecationConfig":
        mode = os.getenv("MAS_DEPRECATION_MODE", "warn").strip().lower()
        if mode not in _MODES:
            mode = "warn"
        return cls(mode=mode, verbose=_env_bool("MAS_DEPRECATION_VERBOSE", False))


_CONFIG = DeprecationConfig()

# Names we've already emitted for.
_EMITTED: set[str] = set()


def set_deprecation_config(config: DeprecationConfig) -> None:
    global _CONFIG
    _CONFIG = config


def get_deprecation_config() -> DeprecationConfig:
    return _CONFIG


def reset_emitted() -> None:
    """Forget which names were announced (tests use this)."""
    _EMITTED.clear()


def _build_header(name: str, message: str | None, since: str | None, alternative: str | None, remove_in: str | None) -> str:
    chunks: list[str] = ["DEPRECATION:", f"{name}."]
    if message:
        chunks.append(message)
    if since:
        chunks.append(f"(since {since})")
    if alternative:
        chunks.append(f"Use {alternative} instead.")
    if remove_in:
        chunks.append(f"(will be removed in {remove_in})")
    return " ".join(chunks)


def emit_deprecation(
    name: str,
    message: str | None = None,
    *,
    since: str | None = None,
    alternative: str | None = None,
    remove_in: str | None = None,
    details: str | None = None,
    stacklevel: int = 3,
) -> None:
    """Announce that ``name`` is deprecated, according to the active config.

    Raises:
        RuntimeError: in "error" mode.
    """
    cfg = _CONFIG
    if cfg.mode == "silent" or name in _EMITTED:
        return
    _EMITTED.add(name)

    header = _build_header(name, message, since, alternative, remove_in)
    if cfg.mode == "error":
        _logger.error(header)
        raise RuntimeError(header)

    warnings.warn(header, category=DeprecationWarning, stacklevel=stacklevel)
    if cfg.verbose:
        _logger.warning("\n".join(filter(None, [header, details])))


def _callsite(func: Callable[..., Any]) -> str:
    qualname = getattr(func, "__qualname__", getattr(func, "__name__", "<function>"))
    try:
        filename = inspect.getsourcefile(func) or "<unknown>"
        lineno = inspect.getsourcelines(func)[1]
    except (OSError, TypeError):
        filename, lineno = "<unknown>", -1
    return f"callsite: {qualname} ({filename}:{lineno})"


# No bare @deprecated without parentheses to avoid ambiguous defaults.


def deprecated(
    message: str | None = None,
    *,
    since: str | None = None,
    alternative: str | None = None,
    remove_in: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorate a function to mark it deprecated."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        name = f"{func.__module__}.{func.__qualname__}"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            emit_deprecation(
                name,
                message,
                since=since,
                alternative=alternative,
                remove_in=remove_in,
                details=_callsite(func),
            )
            return func(*args, **kwargs)

        wrapper.__doc__ = (func.__doc__ or "") + "\n\nDEPRECATED: " + (message or f"use {alternative}")
        return cast(Callable[P, R], wrapper)

    return decorator
