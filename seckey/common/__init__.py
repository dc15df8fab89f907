# Common utilities
from seckey.common.config import Config as Config
from seckey.common.decorators import run_in_background as run_in_background
from seckey.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "run_in_background", "setup_logger"]
