"""
Rate Limiting Configuration

List endpoints accept arbitrary sort/filter/page parameters, so they are
rate limited per client IP.

Design Decisions:
- Uses slowapi for rate limiting (lightweight, FastAPI-compatible)
- Different limits for list and detail endpoints
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Uses IP address for rate limiting
limiter = Limiter(key_func=get_remote_address)

# Format: "count/period" (e.g., "10/minute" means 10 requests per minute)
RATE_LIMITS = {
    "list": "60/minute",
    "detail": "120/minute",
}
