"""Domain exceptions shared by every module.

Raised by the Service Layer when business rules are violated.
Callers catch these and translate them into their own responses.
"""

from __future__ import annotations


class BusinessException(Exception):
    """A business rule failed (e.g. the requested entity does not exist)."""
