from contextlib import ContextDecorator, contextmanager
import logging
from time import perf_counter


###########
# LOGGING #
###########

LOGGER = logging.getLogger('makepw')

@contextmanager
def loglevel(logger, level):
    """Sets the level of a logger during the context."""
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)

class Timed(ContextDecorator):
    """Timing context, reporting the runtime afterward."""
    def __init__(self, msg = 'Done', printer = LOGGER.debug):
        self.msg = msg
        self.printer = printer
    def __enter__(self):
        self.start = perf_counter()
        return self
    def __exit__(self, tp, value, traceback):
        self.end = perf_counter()
        total = self.end - self.start
        self.printer(f'{self.msg} in {total:.3g} sec')


########
# MATH #
########

def ceildiv(a, b):
    """Ceiling division."""
    return -(-a // b)
