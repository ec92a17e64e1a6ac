"""HTTP middleware: timeout, request ID, security headers.

Applied in condo.main.create_app; order matters (last added = outermost).
"""

from condo.middleware.request_id import RequestIDMiddleware
from condo.middleware.security_headers import SecurityHeadersMiddleware
from condo.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
