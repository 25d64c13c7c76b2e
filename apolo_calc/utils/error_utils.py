"""
Error handling utilities for Apolo Calc.

This module provides centralized error handling and logging for the projection
engines. It includes the exception taxonomy and a decorator for consistent
error reporting across the codebase.
"""

import os
import traceback
import logging
from functools import wraps
import sys
from datetime import datetime

# Configure logging; the file handler is added only when APOLO_LOG_FILE is set
_handlers = [logging.StreamHandler(sys.stdout)]
if os.getenv("APOLO_LOG_FILE"):
    _handlers.append(logging.FileHandler(os.getenv("APOLO_LOG_FILE")))

logging.basicConfig(
    level=os.getenv("APOLO_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_handlers,
)

logger = logging.getLogger("apolo_calc")


class ProjectionError(Exception):
    """Base exception class for projection errors"""

    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        self.timestamp = datetime.now()
        super().__init__(self.message)


class InvalidInputError(ProjectionError):
    """Raised when an input record or option set is malformed"""


def error_handler(func):
    """Decorator for handling errors and providing detailed information"""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ProjectionError as e:
            logger.error(f"Error in {func.__qualname__}: {e.message}")
            raise
        except Exception as e:
            exc_type, exc_value, exc_tb = sys.exc_info()
            tb = traceback.extract_tb(exc_tb)

            # Get the most relevant parts of the traceback
            error_location = f"{tb[-1].filename}:{tb[-1].lineno}"
            error_function = tb[-1].name

            error_details = {
                "error_type": exc_type.__name__,
                "location": error_location,
                "function": error_function,
                "arguments": {"args": str(args), "kwargs": str(kwargs)},
                "traceback": traceback.format_exc(),
            }

            logger.error(f"Error in {error_location} - {error_function}: {str(e)}")
            logger.debug(f"Detailed error information: {error_details}")

            raise ProjectionError(
                f"Error in {error_function} at {error_location}: {str(e)}",
                error_details,
            ) from e

    return wrapper


# Module metadata
__version__ = "1.0.0"
__author__ = "Apolo Development Team"
__description__ = "Error handling utilities for Apolo Calc"
