"""Identity router composition.

A single catch-all route forwards every request to the dispatcher, which owns
route selection. FastAPI path matching is only used to reach the endpoint.
"""

from fastapi import APIRouter, Request, Response

from pod_identity.dispatch import IdentityRequestDispatcher
from pod_identity.domain import DispatchResult

IDENTITY_ROUTE_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE")


def api_request_target(request: Request) -> str:
    """Rebuild the raw request target from the ASGI scope.

    Args:
        request: Incoming request.

    Returns:
        str: Undecoded path followed by `?query` when a query string is present.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    query_string = request.scope.get("query_string", b"")
    if query_string:
        return f"{path}?{query_string.decode('latin-1')}"
    return path


def api_render_dispatch(result: DispatchResult) -> Response:
    """Convert a dispatch result into a framework response.

    Args:
        result: Dispatcher output for one request.

    Returns:
        Response: Response carrying the result status, media type and body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return Response(content=result.body, status_code=result.status_code, media_type=result.media_type)


def api_create_identity_router(dispatcher: IdentityRequestDispatcher) -> APIRouter:
    """Create router that answers every path through the dispatcher.

    Args:
        dispatcher: Identity request dispatcher.

    Returns:
        APIRouter: Router exposing the catch-all identity route.

    Raises:
        ValueError: Raised when dispatcher is invalid.
    """

    if dispatcher is None:
        raise ValueError("dispatcher must not be None")

    router = APIRouter(tags=["identity"], redirect_slashes=False)

    @router.api_route("/{request_path:path}", methods=list(IDENTITY_ROUTE_METHODS), include_in_schema=False)
    def api_identity_dispatch(request: Request) -> Response:
        """Answer one request with the dispatcher result.

        Returns:
            Response: Status 200 response for any path.

        Raises:
            RuntimeError: Raised only when request logging fails.
        """

        result = dispatcher.dispatch(method=request.method, request_target=api_request_target(request))
        return api_render_dispatch(result)

    return router
