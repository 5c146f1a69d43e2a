from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from a11y_checker.api.errors import rejection_body
from a11y_checker.audit.exceptions import PayloadTooLargeError
from a11y_checker.logging.logger import Log


class BodySizeLimitMiddleware:
    """Rejects request bodies over max_body_bytes, declared or chunked.

    The body is buffered here and replayed to the app, so nothing past the
    limit is ever handed to a route.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self._app = app
        self._max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self._max_body_bytes:
            await self._reject(scope, receive, send)
            return

        messages: list[Message] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self._max_body_bytes:
                await self._reject(scope, receive, send)
                return
            more_body = message.get("more_body", False)

        async def replay() -> Message:
            if messages:
                return messages.pop(0)
            return await receive()

        await self._app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        exc = PayloadTooLargeError(f"Request body exceeds the {self._max_body_bytes} byte limit")
        Log.warning(f"{scope.get('method')} {scope.get('path')} rejected (413): {exc}")
        response = JSONResponse(status_code=exc.status_code, content=rejection_body(exc))
        await response(scope, receive, send)
