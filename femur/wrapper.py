"""
Function wrapping with execution timing and probabilistic sampling.

femur is used to wrap a function so as to provide an execution timer. When
wrapping a function you provide a callback to which the wrapper passes the
execution duration.

Usage:

    import femur

    def async_max(a, b, cb):
        cb(max(a, b))

    def duration_logger(dur):
        print(f"duration was: {dur}")

    wrapped_max = femur.wrap(async_max, duration_logger)
    wrapped_max(4, 5, print)

A call whose last positional argument is callable follows the trailing-callback
convention: the duration is reported when that callback fires. Any other call
is timed from invocation to return.
"""

from __future__ import annotations

import functools
import logging
import random
from typing import Any, Callable, Optional, TypeVar

from femur.config import settings
from femur.logging.logger import bind_call, get_logger
from femur.utils.timing import ResolutionLike, Timer
from femur.utils.validators import trailing_callback, validate_resolution

F = TypeVar("F", bound=Callable[..., Any])
DurationCallback = Callable[[int], Any]

logger = get_logger("wrapper")


def wrap(
    func: F,
    duration_cb: DurationCallback,
    context: Any = None,
    *,
    resolution: Optional[ResolutionLike] = None,
) -> F:
    """
    Wrap ``func`` so every call reports its duration to ``duration_cb``.

    Equivalent to ``sample(1.0, func, duration_cb, context)``.
    """
    return sample(1.0, func, duration_cb, context, resolution=resolution)


def sample(
    rate: float,
    func: F,
    duration_cb: DurationCallback,
    context: Any = None,
    *,
    resolution: Optional[ResolutionLike] = None,
) -> F:
    """
    Wrap ``func`` so a ``rate`` fraction of calls report their duration.

    Parameters
    ----------
    rate : float
        Probability in [0, 1] that a call is timed. Each call draws
        independently; values <= 0 never sample and values >= 1 always do.
    func : callable
        Function to wrap. Synchronous, or accepting a trailing callback.
    duration_cb : callable
        Receives the duration of each sampled call as an int.
    context : optional
        When given, passed to ``func`` as its first positional argument.
    resolution : optional
        Unit of reported durations; defaults to ``settings.DEFAULT_RESOLUTION``.

    Notes
    -----
    Any callable last positional argument, classes included, is taken as the
    completion callback. ``wrap(isinstance, cb)(5, int)`` therefore hands
    ``isinstance`` the interposed callback in place of ``int``; wrap such
    functions behind a lambda or pass the class by keyword.

    Returns
    -------
    callable
        A function with the calling convention of ``func``.
    """
    unit = validate_resolution(
        resolution if resolution is not None else settings.DEFAULT_RESOLUTION
    )
    func_name = getattr(func, "__qualname__", repr(func))
    bound = () if context is None else (context,)

    @functools.wraps(func)
    def timed_func(*args: Any, **kwargs: Any) -> Any:
        if random.random() >= rate:
            # Don't sample it.
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("sample_skipped", extra=bind_call(func_name, {"sampled": False}))
            return func(*bound, *args, **kwargs)

        timer = Timer()

        if trailing_callback(args):
            # Async: time until func invokes its callback.
            cb = args[-1]

            def timed_cb(*cb_args: Any, **cb_kwargs: Any) -> Any:
                duration = timer.duration(unit)
                logger.debug(
                    "callback_timed",
                    extra=bind_call(
                        func_name,
                        {"sampled": True, "duration": duration, "resolution": unit.value},
                    ),
                )
                duration_cb(duration)
                return cb(*cb_args, **cb_kwargs)

            timer.start()
            return func(*bound, *args[:-1], timed_cb, **kwargs)

        timer.start()
        try:
            result = func(*bound, *args, **kwargs)
        except Exception:
            logger.debug("call_failed", extra=bind_call(func_name, {"sampled": True}))
            raise
        duration = timer.duration(unit)
        logger.debug(
            "call_timed",
            extra=bind_call(
                func_name, {"sampled": True, "duration": duration, "resolution": unit.value}
            ),
        )
        duration_cb(duration)
        return result

    return timed_func  # type: ignore[return-value]


__all__ = ["DurationCallback", "sample", "wrap"]
