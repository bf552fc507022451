"""Request ID middleware.

Every request gets an id, taken from the incoming ``X-Request-ID`` header
when it looks sane and generated otherwise. The id is stored on
``request.state`` for error bodies, echoed in the response header and bound
into the log context.
"""

from __future__ import annotations

import re
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.observability.logging import bind_context, clear_context


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

# Accept caller ids that are short and free of control characters
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request id to the request, the response and the logs."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        clear_context()

        incoming = request.headers.get(self.header_name, "")
        request_id = incoming if _VALID_REQUEST_ID.match(incoming) else uuid.uuid4().hex

        request.state.request_id = request_id
        bind_context(request_id=request_id)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
