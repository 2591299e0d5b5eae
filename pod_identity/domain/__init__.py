"""Domain models used across application layer boundaries."""

from .models import DispatchResult, RequestLogEntry
from .timestamps import domain_format_utc_timestamp, domain_utc_now

__all__ = ["DispatchResult", "RequestLogEntry", "domain_format_utc_timestamp", "domain_utc_now"]
