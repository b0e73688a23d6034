"""Package-wide logger."""
import logging

logger = logging.getLogger("arithmetic_calculator")
# Library stays silent until the application configures logging
logger.addHandler(logging.NullHandler())
