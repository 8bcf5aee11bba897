from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class AllowAllCORSMiddleware(CORSMiddleware):
    """Answer every preflight with an empty 200 and the fixed CORS headers."""

    def preflight_response(self, request_headers: Headers) -> Response:
        return Response(status_code=200, headers=CORS_HEADERS)
