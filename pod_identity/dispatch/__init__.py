"""Request dispatch package for identity route selection and request logging."""

from .dispatcher import (
    GREETING_HEADLINE,
    HEALTH_TARGET,
    INFO_TARGET,
    VERSION_TARGET,
    IdentityRequestDispatcher,
)
from .interfaces import RequestLogPort
from .request_log import LoggingRequestLogger, dispatch_format_request_line

__all__ = [
    "GREETING_HEADLINE",
    "HEALTH_TARGET",
    "INFO_TARGET",
    "VERSION_TARGET",
    "IdentityRequestDispatcher",
    "LoggingRequestLogger",
    "RequestLogPort",
    "dispatch_format_request_line",
]
