"""Unit tests for permissive response decoding.

Tests cover:
- JSON objects decode to dicts
- Empty, malformed and non-object bodies yield DecodeWarning
- decode_response degrades to an empty mapping
"""

from unittest.mock import patch

import pytest

from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Success
from synapsefi.domain.errors import DecodeWarning
from synapsefi.infrastructure.synapse.response_decoder import decode_response, try_decode

LOGGER_PATH = "synapsefi.infrastructure.synapse.response_decoder.logger"


@pytest.mark.unit
class TestTryDecode:
    """Test try_decode."""

    def test_json_object(self):
        result = try_decode(b'{"_id": "u1", "legal_names": ["Ann"]}')

        assert result == Success(value={"_id": "u1", "legal_names": ["Ann"]})

    @pytest.mark.parametrize("body", [None, b"", b"   \n"])
    def test_empty_body(self, body):
        result = try_decode(body)

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecodeWarning)
        assert result.error.is_empty is True
        assert result.error.code == ErrorCode.RESPONSE_BODY_EMPTY

    def test_malformed_body(self):
        result = try_decode(b"<html>502 Bad Gateway</html>")

        assert isinstance(result, Failure)
        assert result.error.is_empty is False
        assert result.error.code == ErrorCode.RESPONSE_DECODE_FAILED
        assert result.error.body_preview == "<html>502 Bad Gateway</html>"

    def test_non_object_json(self):
        result = try_decode(b'["a", "b"]')

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESPONSE_DECODE_FAILED
        assert "list" in result.error.message

    def test_invalid_utf8(self):
        result = try_decode(b"\x80\x81 not utf-8")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESPONSE_DECODE_FAILED

    def test_preview_is_truncated(self):
        result = try_decode(b"x" * 2000)

        assert isinstance(result, Failure)
        assert len(result.error.body_preview) == 500


@pytest.mark.unit
class TestDecodeResponse:
    """Test decode_response."""

    def test_returns_mapping(self):
        assert decode_response(b'{"users": []}') == {"users": []}

    def test_empty_body_logs_debug(self):
        with patch(LOGGER_PATH) as mock_logger:
            assert decode_response(b"", operation="delete_node") == {}

        mock_logger.debug.assert_called_once_with(
            "synapse_api_empty_body", operation="delete_node"
        )
        mock_logger.warning.assert_not_called()

    def test_malformed_body_logs_warning(self):
        with patch(LOGGER_PATH) as mock_logger:
            assert decode_response(b"not json", operation="get_users") == {}

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("synapse_api_decode_warning",)
        assert kwargs["operation"] == "get_users"
        assert kwargs["body_preview"] == "not json"
