"""Unit tests for request schemas and body decoding."""

import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from posts_service.api.body import decode_json_body
from posts_service.schemas.post import (
    INT64_MAX,
    INT64_MIN,
    PostCreate,
    PostDelete,
    PostUpdate,
    replace_lone_surrogates,
)


class TestPostSchemas:
    """Test request model validation."""

    @pytest.mark.parametrize("model", [PostUpdate, PostDelete])
    def test_id_bounds(self, model):
        assert model(id=INT64_MAX).id == INT64_MAX
        assert model(id=INT64_MIN).id == INT64_MIN
        with pytest.raises(ValidationError):
            model(id=INT64_MAX + 1)
        with pytest.raises(ValidationError):
            model(id=INT64_MIN - 1)

    def test_defaults(self):
        assert PostCreate().content == ""
        assert PostUpdate().id == 0
        assert PostDelete().id == 0

    @pytest.mark.parametrize("model", [PostCreate, PostUpdate])
    def test_content_surrogates_replaced(self, model):
        assert model(content="x\ud800y\udfff").content == "x\ufffdy\ufffd"

    def test_replace_lone_surrogates_keeps_normal_text(self):
        assert replace_lone_surrogates("héllo \U0001F600") == "héllo \U0001F600"


class TestDecodeJsonBody:
    """Test decoding of raw request bodies."""

    def test_leading_whitespace_and_trailing_data(self):
        assert decode_json_body(b'  \n{"id": 1} garbage') == {"id": 1}

    def test_invalid_utf8_replaced(self):
        assert decode_json_body(b'{"content": "\xfe"}') == {"content": "\ufffd"}

    @pytest.mark.parametrize("raw", [b"", b"   ", b"{", b"nope"])
    def test_invalid_json_raises_validation_error(self, raw):
        with pytest.raises(RequestValidationError) as exc_info:
            decode_json_body(raw)

        error = exc_info.value.errors()[0]
        assert error["type"] == "json_invalid"
        assert error["loc"][0] == "body"
        assert error["msg"].startswith("JSON decode error")
