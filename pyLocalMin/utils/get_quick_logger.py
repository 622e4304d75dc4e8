import logging
import os

def getQuickLogger(name: str, debug_folder: str) -> logging.Logger:
    """
    Lazy method to get a logger for a minimization run. Repeated calls with
    the same name reuse the existing file handler.

    Parameters
    ----------
    name : str
        logger name
    debug_folder : str
        path to the folder for the log file

    Returns
    -------
    Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    path = os.path.abspath(os.path.join(debug_folder, f"{name}.log"))
    for handler in logger.handlers:
        if getattr(handler, "baseFilename", None) == path:
            return logger

    fh = logging.FileHandler(path)
    fh.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(fh)
    return logger

def clearLoggers(name: str = None):
    """
    Close and detach every handler of the named logger (the root logger if no
    name is given).
    """
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
