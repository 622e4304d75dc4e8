"""
These are utility datastructures for local minimization.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple
import numpy as np

class MinimizerStatus(Enum):
    """
    Enum describing the condition of a minimization process

    Attributes
    ----------
    READY
    NEEDS_EVALUATION
    CONVERGED
    MAX_ITERATIONS
    AT_ENDPOINT
    """
    READY               = auto()
    NEEDS_EVALUATION    = auto()
    CONVERGED           = auto()
    MAX_ITERATIONS      = auto()
    AT_ENDPOINT         = auto()

    def __str__(self):
        return self.name

@dataclass
class MinimizeResult:
    """
    Describes the outcome of a minimization process.

    Attributes
    ----------
    status : MinimizerStatus
    point : float
        last point handed out by the minimizer (best point seen if the search
        was cut short).
    minimum : float or None
        estimated minimizer if the search succeeded.
    value : float or None
        objective value at the reported point.
    iterations : int
        number of objective evaluations used by the search.
    bracket : tuple of float
        final interval known to contain the minimizer.
    message : str
        descriptive status message.
    history : ndarray
        shape (N, 2); every (x, f(x)) pair evaluated, in order.
    """
    status      : MinimizerStatus
    point       : float                 # Last point handed out
    minimum     : float | None          # Final estimate if found
    value       : float | None          # Objective at the reported point
    iterations  : int                   # Number of evaluations used
    bracket     : Tuple[float, float]   # Final bracket
    message     : str                   # Descriptive status message
    history     : np.ndarray = field(
        default_factory=lambda: np.empty((0, 2))
    )

    def __str__(self):
        s = ""
        s += f"status       : {str(self.status)}\n"
        s += f"point        : {self.point:.6f}\n"
        s += f"minimum      : {self.minimum}\n"
        s += f"value        : {self.value}\n"
        s += f"iterations   : {self.iterations}\n"
        s += f"bracket      : ({self.bracket[0]:.6f}, {self.bracket[1]:.6f})\n"
        s += f"message      : {self.message}\n"
        return s
