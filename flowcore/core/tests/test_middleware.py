from unittest.mock import patch

from django.http import HttpResponse
from django.test import RequestFactory

from core.middleware import RequestLoggingMiddleware


def test_logs_request_and_response():
    middleware = RequestLoggingMiddleware(lambda request: HttpResponse(status=204))
    with patch("core.middleware.logger") as log:
        response = middleware(RequestFactory().get("/trello-board/my-boards/?page=2"))

    assert response.status_code == 204
    first, second = log.info.call_args_list
    assert first.args == ("Request: %s %s", "GET", "/trello-board/my-boards/?page=2")
    assert second.args[:4] == ("Response: %s %s %s - %sms", "GET", "/trello-board/my-boards/?page=2", 204)
