from . import utils
from .utils import (InvalidIntervalError, MinimizeConfig, minimize1d,
                    minimize_function, MinimizerState, MinimizerStatus,
                    MinimizeResult)

__all__ = [
    "InvalidIntervalError",
    "MinimizeConfig",
    "minimize1d",
    "minimize_function",
    "MinimizerState",
    "MinimizerStatus",
    "MinimizeResult",
    "utils"
]
