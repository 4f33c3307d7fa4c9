"""
Routing module for directing formatted lines to console and file sinks
"""

from simple_logger.routing.output_router import OutputRouter, STDOUT_SINK

__all__ = ["OutputRouter", "STDOUT_SINK"]
