"""Bearer-First Route — rejects requests without a bearer token before the body is read.

Invariants:
    - The Authorization header is checked before FastAPI decodes the JSON body,
      so an unparseable body without a credential answers 401, not 400
    - Only the header's shape is checked here; token verification stays in
      the get_current_user_id dependency
"""

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request, Response
from fastapi.routing import APIRoute

from flashdeck.core.bearer import extract_bearer_token
from flashdeck.core.errors import UnauthorizedError


class BearerFirstRoute(APIRoute):
    """APIRoute whose handler refuses a missing or malformed credential first."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def bearer_first_handler(request: Request) -> Response:
            if extract_bearer_token(request.headers.get("authorization")) is None:
                raise UnauthorizedError()
            return await route_handler(request)

        return bearer_first_handler
