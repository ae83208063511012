import time
from functools import wraps

from wcag_analysis.logger_config import logger


def measure_execution_time(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        try:
            return func(*args, **kwargs)
        finally:
            execution_time = round(time.time() - start_time, 4)
            logger.info(f"{func.__name__} executed in {execution_time} seconds")
    return wrapper
