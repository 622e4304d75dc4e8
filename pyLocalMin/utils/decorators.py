from typing import Any, Callable
from logging import Logger
import time
import functools

def compose_decorators(*decorators: Callable) -> Callable:
    """
    Compose multiple decorators into a single decorator, preserving metadata.

    Parameters
    ----------
    *decorators : Callable
        Any number of decorators to apply. The first one listed is applied last.

    Returns
    -------
    Callable
        A new decorator that applies all of the given decorators in order.
    """

    def composed(f: Callable) -> Callable:
        original = f
        for decorator in reversed(decorators):
            f = decorator(f)
        return functools.wraps(original)(f)

    return composed

def sample(N: int, wait: float = 0) -> Callable:
    """
    Decorator that modifies a getter to sample a value several times and return
    the mean. Useful for noisy objectives.

    Parameters
    ----------
    N : int
        number of samples to take.
    wait : float, default=0.0
        seconds between taking samples
    """
    if N < 1:
        raise ValueError(f"sample expects N >= 1, got {N}.")

    def wrap(f: Callable) -> Callable:
        @functools.wraps(f)
        def f_sampled(*args, **kwargs):
            s = 0
            for i in range(N):
                s += f(*args, **kwargs)
                if wait and i < N - 1:
                    time.sleep(wait)
            return s/N

        return f_sampled

    return wrap

def log_evaluation(logger: Logger) -> Callable:
    """
    Decorator that modifies an objective to log each argument and the value
    it produced.

    Parameters
    ----------
    logger : Logger
    """

    def wrap(f: Callable) -> Callable:
        @functools.wraps(f)
        def f_logging(*args, **kwargs):
            res = f(*args, **kwargs)
            logger.debug(
                f"{f.__name__}(args = {args}, kwargs = {kwargs}) = {res}"
            )
            return res

        return f_logging

    return wrap

def limit_setter(min: float, max: float) -> Callable:
    """
    Decorator that limits the range of a function that takes a float as its
    argument.

    Parameters
    ----------
    min : float
    max : float
    """

    def wrap(f: Callable[[float], Any]) -> Callable:
        @functools.wraps(f)
        def f_limited(x: float):
            if x < min or x > max:
                raise ValueError(
                    f"{f.__name__} takes values between {min} and {max}."
                )

            return f(x)

        return f_limited

    return wrap
