"""
Utility modules for the box inspector.
"""

from box_engine.utils.config import Config
from box_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
