"""
Exception hierarchy for the Universal Integration Layer

Missing platform profiles are treated as empty data, so the only
domain error is a missing core identity.
"""

from typing import Dict, Any, Optional


class IntegrationLayerError(Exception):
    """Base exception for all integration layer errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserNotFoundError(IntegrationLayerError):
    """Raised when the core user identity does not exist."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}", {"user_id": user_id})
