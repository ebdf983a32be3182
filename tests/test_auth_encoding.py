import base64

import pytest

from fetch_request.auth.encoding import encode_auth


def b64(s):
    return base64.b64encode(s.encode()).decode()


class TestEncodeAuth:
    def test_basic(self):
        h = encode_auth("basic", username="u", password="p")
        assert h == {"Authorization": f"Basic {b64('u:p')}"}

    def test_basic_utf8(self):
        h = encode_auth("basic", username="jürgen", password="pässword")
        assert h == {"Authorization": f"Basic {b64('jürgen:pässword')}"}

    def test_bearer(self):
        h = encode_auth("bearer", token="raw_tok")
        assert h == {"Authorization": "Bearer raw_tok"}

    def test_type_is_case_insensitive(self):
        h = encode_auth("BEARER", token="t")
        assert h == {"Authorization": "Bearer t"}

    def test_none(self):
        assert encode_auth("none") == {}

    # --- Errors ---
    def test_basic_missing_password(self):
        with pytest.raises(ValueError, match="requires"):
            encode_auth("basic", username="u")

    def test_bearer_missing_token(self):
        with pytest.raises(ValueError, match="requires token"):
            encode_auth("bearer")

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported auth type"):
            encode_auth("hmac")
