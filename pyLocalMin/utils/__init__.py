from . import decorators
from .get_quick_logger import getQuickLogger, clearLoggers
from .localmin import (InvalidIntervalError, MinimizerState, scaled_tolerances,
                       sign_magnitude)
from .minimize_1d import MinimizeConfig, minimize1d, minimize_function
from .minimizer_status import MinimizeResult, MinimizerStatus

__all__ = [
    "clearLoggers",
    "decorators",
    "getQuickLogger",
    "InvalidIntervalError",
    "MinimizeConfig",
    "minimize1d",
    "minimize_function",
    "MinimizerState",
    "MinimizerStatus",
    "MinimizeResult",
    "scaled_tolerances",
    "sign_magnitude"
]
