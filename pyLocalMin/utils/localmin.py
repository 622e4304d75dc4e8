"""
This class implements Brent's method for local minimization of a scalar
function on an interval, combining golden section search and successive
parabolic interpolation. It uses reverse communication: the minimizer never
calls the objective itself. Each call to `step` returns a point where the
objective must be evaluated, and the caller hands the measured value back on
the next call. This lets the objective be an expensive or remote measurement.

The method cannot detect a minimizer located exactly at either endpoint of
the initial interval. If this is a concern, compare the returned estimate
against the values at the endpoints.

Reference: R. Brent, Algorithms for Minimization Without Derivatives, Dover,
2002.
"""

from .minimizer_status import MinimizerStatus
from logging import Logger
from math import sqrt
from typing import Generator, Tuple
import numpy as np

MACHINE_EPSILON = float(np.finfo(float).eps)
SQRT_EPSILON    = sqrt(MACHINE_EPSILON)
GOLDEN_STEP     = 0.5 * (3.0 - sqrt(5.0))   # squared inverse golden ratio

class InvalidIntervalError(ValueError):
    """Raised when a search interval is empty or inverted."""
    def __init__(self, low: float, high: float):
        self.low = low
        self.high = high
        super().__init__(
            f"A < B is required, but A = {low:f}; B = {high:f}"
        )

def sign_magnitude(magnitude: float, sign_source: float) -> float:
    """
    Return `magnitude` carrying the sign of `sign_source`. A zero sign source
    (including -0.0) counts as positive.
    """
    magnitude = abs(magnitude)
    return magnitude if sign_source >= 0 else -magnitude

def scaled_tolerances(x: float) -> Tuple[float, float]:
    """
    Tolerances used around the current best point `x`.

    Returns
    -------
    tol1 : float
        minimum separation between `x` and the next trial point.
    tol2 : float
        twice `tol1`; used by the convergence test.
    """
    tol1 = SQRT_EPSILON * abs(x) + MACHINE_EPSILON / 3.0
    return tol1, 2.0 * tol1

class MinimizerState:
    """
    Reverse communication implementation of Brent's local minimizer.

    Typical usage::

        M = MinimizerState(a, b)
        value = 0.0
        while True:
            x = M.step(value)
            if M.is_ready():
                break
            value = f(x)
    """
    def __init__(self, low: float, high: float, logger: Logger = None):
        """
        Parameters
        ----------
        low, high : float
            endpoints of the search interval; `low < high` is required.
        logger : Logger, optional

        Raises
        ------
        InvalidIntervalError
        """
        if not low < high:
            raise InvalidIntervalError(low, high)

        self.logger = logger

        # Bracket containing the minimizer
        self._a = float(low)
        self._b = float(high)

        # 0: ready, 1: awaiting f(x), >=2: awaiting f(u)
        self._iteration = 0
        self._converged = False
        self._arg = 0.0

        # x: best point, w: second best, v: previous value of w
        self._x = self._w = self._v = 0.0
        self._fx = self._fw = self._fv = 0.0

        # Trial point
        self._u = 0.0
        self._fu = 0.0

        # d: last step, e: step before last
        self._d = 0.0
        self._e = 0.0

        # Parabola fit
        self._p = self._q = self._r = 0.0

    @property
    def bracket(self) -> Tuple[float, float]:
        """Current interval known to contain the minimizer."""
        return self._a, self._b

    @property
    def arg(self) -> float:
        """Most recently returned point."""
        return self._arg

    @property
    def best(self) -> float:
        """Best point evaluated so far (the initial point before that)."""
        return self._x

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def has_converged(self) -> bool:
        """True once `step` has returned the final estimate."""
        return self._converged

    @property
    def status(self) -> MinimizerStatus:
        if self._converged:
            return MinimizerStatus.CONVERGED
        if self._iteration == 0:
            return MinimizerStatus.READY
        return MinimizerStatus.NEEDS_EVALUATION

    def is_ready(self) -> bool:
        """
        True before the first step and right after the final estimate is
        returned. Use `has_converged` to tell the two apart.
        """
        return self._iteration == 0

    def step(self, value: float) -> float:
        """
        Provide the objective value at the last returned point and get the
        next point to evaluate.

        Parameters
        ----------
        value : float
            objective at `arg`; ignored on the first call.

        Returns
        -------
        float
            next point to evaluate or, if `is_ready()` is now True, the
            estimated minimizer.
        """
        a, b = self._a, self._b

        if self._iteration == 0:
            self._converged = False
            self._x = self._w = self._v = a + GOLDEN_STEP * (b - a)
            self._e = 0.0
            self._iteration = 1
            self._arg = self._x
            if self.logger:
                self.logger.debug(
                    f"Starting search on [{a}, {b}] at x = {self._x}"
                )
            return self._arg

        if self._iteration == 1:
            self._fx = self._fw = self._fv = value

        else:
            self._update_bracket(value)

        a, b = self._a, self._b
        x = self._x
        midpoint = 0.5 * (a + b)
        tol1, tol2 = scaled_tolerances(x)

        # Stopping criterion
        if abs(x - midpoint) <= tol2 - 0.5 * (b - a):
            self._iteration = 0
            self._converged = True
            if self.logger:
                self.logger.debug(
                    f"Converged on [{a}, {b}]; estimate {self._arg}"
                )
            return self._arg

        if abs(self._e) <= tol1:
            self._golden_section(midpoint)
        else:
            self._parabolic(midpoint, tol1, tol2)

        # Never evaluate closer than tol1 to x
        d = self._d
        if tol1 <= abs(d):
            self._u = x + d
        else:
            self._u = x + sign_magnitude(tol1, d)

        self._arg = self._u
        self._iteration += 1
        return self._arg

    def search(self) -> Generator[float, float, float]:
        """
        Generator form of the reverse communication loop. Yields points to
        evaluate, expects the objective values through `send`, and returns
        the estimated minimizer as the `StopIteration` value.

        Raises
        ------
        RuntimeError
            if the minimizer has already been stepped.
        """
        if self._iteration != 0 or self._converged:
            raise RuntimeError(
                "search() requires a freshly constructed MinimizerState"
            )
        return self._search()

    def _search(self) -> Generator[float, float, float]:
        point = self.step(0.0)
        while not self.is_ready():
            value = yield point
            point = self.step(value)
        return point

    def _update_bracket(self, fu: float):
        """Incorporate f(u) into the bracket and the (x, w, v) triple."""
        self._fu = fu
        u, x = self._u, self._x

        if fu <= self._fx:
            if x <= u:
                self._a = x
            else:
                self._b = x
            self._v, self._fv = self._w, self._fw
            self._w, self._fw = x, self._fx
            self._x, self._fx = u, fu
            return

        if u < x:
            self._a = u
        else:
            self._b = u

        if fu <= self._fw or self._w == x:
            self._v, self._fv = self._w, self._fw
            self._w, self._fw = u, fu
        elif fu <= self._fv or self._v == x or self._v == self._w:
            self._v, self._fv = u, fu

    def _golden_section(self, midpoint: float):
        x = self._x
        self._e = self._a - x if midpoint <= x else self._b - x
        self._d = GOLDEN_STEP * self._e
        if self.logger:
            self.logger.debug(f"Golden section step d = {self._d}")

    def _parabolic(self, midpoint: float, tol1: float, tol2: float):
        """Try a parabolic step, falling back to golden section."""
        a, b = self._a, self._b
        x, w, v = self._x, self._w, self._v

        r = (x - w) * (self._fx - self._fv)
        q = (x - v) * (self._fx - self._fw)
        p = (x - v) * q - (x - w) * r
        q = 2.0 * (q - r)
        if 0.0 < q:
            p = -p
        q = abs(q)
        r = self._e
        self._e = self._d
        self._p, self._q, self._r = p, q, r

        if abs(0.5 * q * r) <= abs(p) or p <= q * (a - x) or q * (b - x) <= p:
            self._golden_section(midpoint)
            return

        self._d = p / q
        u = x + self._d

        # Keep away from the bracket endpoints
        if (u - a) < tol2 or (b - u) < tol2:
            self._d = sign_magnitude(tol1, midpoint - x)

        if self.logger:
            self.logger.debug(f"Parabolic step d = {self._d}")
