"""API router package for endpoint composition."""

from .identity import IDENTITY_ROUTE_METHODS, api_create_identity_router, api_render_dispatch, api_request_target

__all__ = ["IDENTITY_ROUTE_METHODS", "api_create_identity_router", "api_render_dispatch", "api_request_target"]
