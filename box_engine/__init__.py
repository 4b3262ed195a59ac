"""
Box Inspector - box-type classification for rendered document trees.
"""

import logging

# Package information
__version__ = "1.0.0"
__author__ = "Box Inspector Team"
__description__ = "Box-type classification for CSS layout inspection"

# Applications configure handlers, see box_engine.utils.logging.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
