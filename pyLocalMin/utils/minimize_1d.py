"""
This is a general procedure for minimizing a measured quantity over a single
parameter. The parameter is set, the quantity is measured, and the result is
handed to a reverse communication Brent minimizer until it converges.
"""

from .decorators import (compose_decorators, limit_setter, log_evaluation,
                         sample)
from .localmin import MinimizerState
from .minimizer_status import MinimizeResult, MinimizerStatus
from dataclasses import dataclass
from typing import Any, Callable, Tuple
import numpy as np

@dataclass
class MinimizeConfig:
    """
    Configurations specifying how we should minimize.

    Attributes
    ----------
    set_x : Callable
        setter for the `x` parameter.
    get_y : Callable
        getter for the `y` parameter (the objective).
    search_range : tuple of float
        (min, max) range of values `x` can take.
    max_iter : int, default=200
        maximum objective evaluations before giving up.
    samples : int, default=1
        number of measurements of `y` averaged at each point.
    sample_wait : float, default=0.0
        seconds between repeated measurements.
    check_endpoints : bool, default=False
        also measure at both ends of `search_range` after convergence, since
        the minimizer cannot find a minimum located exactly at an endpoint.
    logger : Logger, optional
    """
    set_x           : Callable[[float], Any]    # Set independent parameter
    get_y           : Callable[[], float]       # Function we are minimizing
    search_range    : Tuple[float, float]       # Range of values x can take
    max_iter        : int = 200                 # Max objective evaluations
    samples         : int = 1                   # Measurements per point
    sample_wait     : float = 0.0               # Wait between measurements
    check_endpoints : bool = False              # Compare against endpoints
    logger          : object = None             # Logger

def minimize1d(C: MinimizeConfig) -> MinimizeResult:
    """
    Minimize `y` over `x` within the search range.

    Parameters
    ----------
    C : MinimizeConfig

    Returns
    -------
    MinimizeResult

    Raises
    ------
    InvalidIntervalError
        if the search range is empty or inverted.
    """
    min_x, max_x = C.search_range
    if C.logger:
        C.logger.info("=" * 80)
        C.logger.info(f"1D Minimization Procedure: range = ({min_x}, {max_x})")

    Minimizer = MinimizerState(min_x, max_x, logger=C.logger)

    # Refuse points outside the search range before they reach the setter
    set_x = limit_setter(min_x, max_x)(C.set_x)

    getter_decorators = []
    if C.logger:
        getter_decorators.append(log_evaluation(C.logger))
    if C.samples != 1:
        getter_decorators.append(sample(C.samples, C.sample_wait))
    get_y = C.get_y
    if getter_decorators:
        get_y = compose_decorators(*getter_decorators)(get_y)

    def measure(x: float) -> float:
        set_x(x)
        return get_y()

    history = []
    point = Minimizer.step(0.0)

    while not Minimizer.is_ready():
        if len(history) >= C.max_iter:
            if history:
                best_x, best_y = min(history, key=lambda h: h[1])
            else:
                best_x, best_y = point, None
            if C.logger:
                C.logger.warning("Minimization terminated unsuccessfully.")
                C.logger.warning(
                    f"Max iterations ({C.max_iter}) used during minimization."
                )
            return MinimizeResult(
                status      = MinimizerStatus.MAX_ITERATIONS,
                point       = best_x,
                minimum     = None,
                value       = best_y,
                iterations  = len(history),
                bracket     = Minimizer.bracket,
                message     = "Reached the maximum number of iterations.",
                history     = np.array(history).reshape(-1, 2)
            )

        y = measure(point)
        history.append((point, y))
        if C.logger:
            C.logger.info(f"f({point:.8g}) = {y:.8g}")

        point = Minimizer.step(y)

    iterations = len(history)
    value = history[-1][1]
    result = MinimizeResult(
        status      = MinimizerStatus.CONVERGED,
        point       = point,
        minimum     = point,
        value       = value,
        iterations  = iterations,
        bracket     = Minimizer.bracket,
        message     = "Minimum found within tolerance",
    )

    if C.check_endpoints:
        y_min = measure(min_x)
        y_max = measure(max_x)
        history += [(min_x, y_min), (max_x, y_max)]
        if C.logger:
            C.logger.info(f"Endpoint values: f({min_x}) = {y_min}, "
                          f"f({max_x}) = {y_max}")

        if y_min < value or y_max < value:
            x_end, y_end = (min_x, y_min) if y_min <= y_max else (max_x, y_max)
            result.status = MinimizerStatus.AT_ENDPOINT
            result.minimum = x_end
            result.value = y_end
            result.message = "Minimum found at an endpoint of the range"

        # Leave the parameter at the reported minimum
        set_x(result.minimum)

    result.history = np.array(history).reshape(-1, 2)

    if C.logger:
        C.logger.info(f"  Minimum found: {result.minimum:.6f}")
        C.logger.info(f"  Status: {result.status}")
        C.logger.info("Minimization terminated successfully")

    return result

def minimize_function(f: Callable[[float], float], low: float, high: float,
                      **kwargs) -> MinimizeResult:
    """
    Minimize an ordinary function of one variable on [low, high].

    Parameters
    ----------
    f : Callable
        objective function.
    low, high : float
        search range.
    **kwargs
        remaining `MinimizeConfig` fields.

    Returns
    -------
    MinimizeResult
    """
    current = [low]

    def set_x(x: float):
        current[0] = x

    def get_y() -> float:
        return f(current[0])

    C = MinimizeConfig(set_x=set_x, get_y=get_y, search_range=(low, high),
                       **kwargs)
    return minimize1d(C)
