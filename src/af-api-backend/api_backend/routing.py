"""Route class for the account form endpoints."""

# Standard Library
from typing import Callable, Coroutine, Any

# Third Party
from fastapi import Request, Response
from fastapi.routing import APIRoute

JSON_CONTENT_TYPE = (b"content-type", b"application/json")


def is_json_content_type(value: str) -> bool:
    """Whether a Content-Type header value names a JSON media type."""
    media_type = value.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class JSONBodyRoute(APIRoute):
    """An APIRoute that reads every request body as JSON.

    Form submissions may arrive without a Content-Type header, or as
    ``text/plain`` when sent as a bare string. The body is still parsed as
    JSON; a body that is not JSON is rejected by the usual validation path.
    """

    def get_route_handler(
        self,
    ) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def json_body_route_handler(request: Request) -> Response:
            content_type = request.headers.get("content-type", "")
            if not is_json_content_type(content_type):
                request.scope["headers"] = [
                    (name, value)
                    for name, value in request.scope["headers"]
                    if name.lower() != b"content-type"
                ] + [JSON_CONTENT_TYPE]
                request = Request(request.scope, request.receive)
            return await original_route_handler(request)

        return json_body_route_handler
