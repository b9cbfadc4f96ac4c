import pytest
import requests
from dataclasses import replace
from unittest.mock import MagicMock, patch

from core.clients.storage_client import StorageClient
from core.errors import UpstreamError


def _response(json_data):
    resp = MagicMock()
    resp.json.return_value = json_data
    resp.raise_for_status.return_value = None
    return resp


def test_upload_returns_url(config):
    client = StorageClient(replace(config, storage_api_key="k"))
    with patch("core.clients.storage_client.requests.post", return_value=_response({"url": "http://cdn/x.png"})) as post:
        url = client.upload(content=b"png", filename="x.png", content_type="image/png", folder="boards/1/cards/2")

    assert url == "http://cdn/x.png"
    kwargs = post.call_args.kwargs
    assert kwargs["headers"] == {"Authorization": "Bearer k"}
    assert kwargs["data"] == {"folder": "boards/1/cards/2"}
    assert kwargs["files"]["file"] == ("x.png", b"png", "image/png")


def test_upload_http_error_raises_upstream(config):
    with patch("core.clients.storage_client.requests.post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(UpstreamError):
            StorageClient(config).upload(content=b"", filename="x.png", content_type="image/png")


def test_upload_without_url_in_response(config):
    with patch("core.clients.storage_client.requests.post", return_value=_response({})):
        with pytest.raises(UpstreamError):
            StorageClient(config).upload(content=b"", filename="x.png", content_type="image/png")


def test_unconfigured_storage(config):
    with pytest.raises(UpstreamError):
        StorageClient(replace(config, storage_upload_url="")).upload(content=b"", filename="a", content_type="image/png")
