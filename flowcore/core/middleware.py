import logging
import time

logger = logging.getLogger("api")


class RequestLoggingMiddleware:
    """Logs every request and the status/duration of its response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        method, path = request.method, request.get_full_path()
        start = time.monotonic()
        logger.info("Request: %s %s", method, path)

        response = self.get_response(request)

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.info("Response: %s %s %s - %sms", method, path, response.status_code, duration_ms)
        return response
