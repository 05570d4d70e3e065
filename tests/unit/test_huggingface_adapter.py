from unittest.mock import MagicMock, patch

import httpx
import pytest

from smartdocs.embeddings.exceptions import EmbeddingError, EmbeddingNetworkError
from smartdocs.embeddings.huggingface_adapter import HuggingFaceEmbeddingAdapter


def _response(status_code: int, payload: object = None) -> httpx.Response:
    request = httpx.Request("POST", "https://example.test")
    if payload is None:
        return httpx.Response(status_code, text="model loading", request=request)
    return httpx.Response(status_code, json=payload, request=request)


def _make_adapter(
    http_client: MagicMock, api_key: str = "hf-key", max_retries: int = 2
) -> HuggingFaceEmbeddingAdapter:
    return HuggingFaceEmbeddingAdapter(
        api_key=api_key,
        model="org/model",
        timeout_seconds=5,
        max_retries=max_retries,
        retry_backoff_seconds=0.5,
        http_client=http_client,
    )


class TestHuggingFaceEmbeddingAdapter:
    def test_returns_vectors(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(200, [[0.1, 0.2], [1, 0]])
        assert _make_adapter(http).embed(["a", "b"]) == [[0.1, 0.2], [1.0, 0.0]]

    def test_posts_to_feature_extraction_pipeline(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(200, [[0.1]])
        _make_adapter(http).embed(["a"])
        url = http.post.call_args.args[0]
        assert url.endswith("/org/model/pipeline/feature-extraction")
        assert http.post.call_args.kwargs["json"] == {"inputs": ["a"]}
        assert http.post.call_args.kwargs["headers"]["Authorization"] == "Bearer hf-key"

    def test_empty_input_makes_no_request(self) -> None:
        http = MagicMock()
        assert _make_adapter(http).embed([]) == []
        http.post.assert_not_called()

    def test_missing_api_key(self) -> None:
        with pytest.raises(EmbeddingNetworkError, match="API key not configured"):
            _make_adapter(MagicMock(), api_key="").embed(["a"])


class TestModelLoadingRetry:
    def test_retries_503_then_succeeds(self) -> None:
        http = MagicMock()
        http.post.side_effect = [_response(503), _response(200, [[1.0]])]
        with patch("smartdocs.embeddings.huggingface_adapter.time.sleep") as mock_sleep:
            result = _make_adapter(http).embed(["a"])
        assert result == [[1.0]]
        mock_sleep.assert_called_once_with(0.5)

    def test_gives_up_after_max_retries(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(503)
        with patch("smartdocs.embeddings.huggingface_adapter.time.sleep") as mock_sleep:
            with pytest.raises(EmbeddingNetworkError, match="503"):
                _make_adapter(http, max_retries=2).embed(["a"])
        assert http.post.call_count == 3
        assert mock_sleep.call_count == 2

    def test_client_errors_are_not_retried(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(401, {"error": "bad token"})
        with patch("smartdocs.embeddings.huggingface_adapter.time.sleep") as mock_sleep:
            with pytest.raises(EmbeddingNetworkError, match="401"):
                _make_adapter(http).embed(["a"])
        assert http.post.call_count == 1
        mock_sleep.assert_not_called()

    def test_malformed_payload_is_not_retried(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(200, {"unexpected": True})
        with pytest.raises(EmbeddingError, match="unexpected embedding payload"):
            _make_adapter(http).embed(["a"])
        assert http.post.call_count == 1

    def test_transport_error(self) -> None:
        http = MagicMock()
        http.post.side_effect = httpx.ConnectError("refused")
        with pytest.raises(EmbeddingNetworkError, match="network error"):
            _make_adapter(http).embed(["a"])

    def test_nested_token_vectors_rejected(self) -> None:
        http = MagicMock()
        http.post.return_value = _response(200, [[[0.1, 0.2]]])
        with pytest.raises(EmbeddingError, match="flat lists"):
            _make_adapter(http).embed(["a"])
