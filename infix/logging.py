import logging
import os
from logging import getLogger

log = getLogger("infix")
logging.basicConfig(format="[infix] %(message)s")

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def has_env(varname, value="true"):
    """
    Check environment variable is set.
    """
    return os.environ.get(varname, "").lower() == value


def env_log_level():
    """
    Logging level requested by the DEBUG or INFIX_LOG environment variables.

    The calculator is silent (CRITICAL) unless one of them is set.
    """
    if has_env("DEBUG"):
        return logging.DEBUG
    return LOG_LEVELS.get(os.environ.get("INFIX_LOG", "").lower(), logging.CRITICAL)


def debug_from_env():
    """
    True if INFIX_DEBUG asks for the evaluation trace.
    """
    return has_env("INFIX_DEBUG") or has_env("INFIX_DEBUG", "1")


log.setLevel(env_log_level())
