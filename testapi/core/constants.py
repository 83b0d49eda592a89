"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `testapi/core/config.py` instead.

Categories:
- User numbering: Baseline for iterated user numbers
- Timeouts: Default timeouts for external service calls
- Limits: Truncation and safety limits
"""

# =============================================================================
# User Numbering
# =============================================================================

FIRST_USER_NUMBER: int = 1
"""Number handed out for a (user type, application) pair with no numbered users."""


# =============================================================================
# Timeouts
# =============================================================================

USER_API_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout in seconds for User API (directory) requests."""


# =============================================================================
# Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum characters of an upstream response body kept on error values."""
