"""FastAPI application factory for the identity service.

Interactive docs, the OpenAPI document and trailing-slash redirects are
disabled so that every path, including `/docs/` style ones, reaches the
dispatcher unchanged.
"""

from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from pod_identity.dispatch import IdentityRequestDispatcher

from .routers import api_create_identity_router, api_render_dispatch, api_request_target


def create_api_application(dispatcher: IdentityRequestDispatcher) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        dispatcher: Identity request dispatcher shared by all routes.

    Returns:
        FastAPI: Framework application instance answering every request with 200.

    Raises:
        ValueError: Raised when dispatcher is None.
    """

    if dispatcher is None:
        raise ValueError("dispatcher must not be None")

    application = FastAPI(
        title="Pod Identity",
        version=dispatcher.config.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    application.include_router(api_create_identity_router(dispatcher=dispatcher))

    @application.exception_handler(StarletteHTTPException)
    async def api_dispatch_unrouted(request: Request, _error: StarletteHTTPException) -> Response:
        """Route requests the framework rejected, e.g. extension methods, through the dispatcher.

        Returns:
            Response: Status 200 dispatcher response.

        Raises:
            RuntimeError: Raised only when request logging fails.
        """

        result = dispatcher.dispatch(method=request.method, request_target=api_request_target(request))
        return api_render_dispatch(result)

    return application
