"""Project-wide logger for diskweave.

Every submodule logs through the ``diskweave`` logger defined here.  It only
carries a ``NullHandler``; output is switched on through the root logger by
:func:`diskweave.logging.init_logging`, so records are emitted once.
"""

import logging


logger = logging.getLogger("diskweave")
logger.addHandler(logging.NullHandler())


__all__ = ["logger"]
