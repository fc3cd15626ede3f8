"""Tests for palbox.proxy: the secondary backend client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from palbox.proxy import BackendClient, BackendError


def _mock_response(body, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.is_error = status >= 400
    resp.content = b"" if body is None else b"{}"
    resp.json.return_value = body
    return resp


@pytest.fixture
def backend() -> BackendClient:
    return BackendClient("http://localhost:8080/")


async def test_add_pal_converts_gender_word(backend: BackendClient) -> None:
    mock_request = AsyncMock(return_value=_mock_response({"message": "ok"}))
    with patch("httpx.AsyncClient.request", mock_request):
        await backend.add_pal("Lamball", "Female", ["Swift"])
    method, url = mock_request.call_args[0]
    assert (method, url) == ("POST", "http://localhost:8080/add-pal")
    assert mock_request.call_args.kwargs["json"] == {
        "name": "Lamball", "gender": "f", "passive_skills": ["Swift"],
    }


async def test_remove_pal_sends_body(backend: BackendClient) -> None:
    mock_request = AsyncMock(return_value=_mock_response(None))
    with patch("httpx.AsyncClient.request", mock_request):
        await backend.remove_pal("Lamball", 2)
    method, url = mock_request.call_args[0]
    assert (method, url) == ("DELETE", "http://localhost:8080/remove-pal")
    assert mock_request.call_args.kwargs["json"] == {"name": "Lamball", "id": 2}


async def test_list_pals_unwraps_message(backend: BackendClient) -> None:
    rows = [{"id": 1, "name": "Lamball", "image_url": "", "gender": "m", "passive_skills": []}]
    with patch("httpx.AsyncClient.request", AsyncMock(return_value=_mock_response({"message": rows}))):
        assert await backend.list_pals() == rows


async def test_options_default_to_empty(backend: BackendClient) -> None:
    with patch("httpx.AsyncClient.request", AsyncMock(return_value=_mock_response({}))):
        assert await backend.species_options() == []
        assert await backend.trait_options() == []


async def test_upstream_error_keeps_status_and_message(backend: BackendClient) -> None:
    resp = _mock_response({"message": "Invalid pal name: Nope"}, 400)
    with patch("httpx.AsyncClient.request", AsyncMock(return_value=resp)):
        with pytest.raises(BackendError) as exc:
            await backend.add_pal("Nope", "m", [])
    assert exc.value.status_code == 400
    assert str(exc.value) == "Invalid pal name: Nope"


async def test_upstream_error_without_message(backend: BackendClient) -> None:
    resp = _mock_response(None, 500)
    resp.json.side_effect = ValueError("no body")
    with patch("httpx.AsyncClient.request", AsyncMock(return_value=resp)):
        with pytest.raises(BackendError, match="HTTP 500") as exc:
            await backend.list_pals()
    assert exc.value.status_code == 500


async def test_unreachable_backend_is_502(backend: BackendClient) -> None:
    with patch("httpx.AsyncClient.request", AsyncMock(side_effect=httpx.ConnectError("refused"))):
        with pytest.raises(BackendError) as exc:
            await backend.list_pals()
    assert exc.value.status_code == 502
