"""Non-fatal developer diagnostics.

Warnings are routed through :mod:`logging` under ``pyredux.diagnostics`` so
applications can silence or capture them with their usual handlers.
"""

from __future__ import annotations

import logging

_logger = logging.getLogger("pyredux.diagnostics")


def warning(message: str) -> None:
    """Log a development-time diagnostic.  Never raises."""
    _logger.warning(message)
