# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the shared text helpers."""

from __future__ import annotations

import pytest

from connstring.errors import ConnectionStringFormatError
from connstring.utils import decode_component, encode_component, is_text, trim


class TestTrim:
    def test_strips_both_ends(self) -> None:
        assert trim(" \t a b \n") == "a b"


class TestIsText:
    @pytest.mark.parametrize("value", ["a", " a ", "\tx"])
    def test_text(self, value: str) -> None:
        assert is_text(value)

    @pytest.mark.parametrize("value", ["", "  ", "\n\t", None, 1, ["a"]])
    def test_not_text(self, value: object) -> None:
        assert not is_text(value)


class TestEncodeComponent:
    def test_reserved_characters_are_escaped(self) -> None:
        assert encode_component(":/?#[]@,;=&+$ ") == (
            "%3A%2F%3F%23%5B%5D%40%2C%3B%3D%26%2B%24%20"
        )

    def test_unreserved_characters_are_kept(self) -> None:
        assert encode_component("Az09-_.!~*'()") == "Az09-_.!~*'()"

    def test_utf8(self) -> None:
        assert encode_component("é") == "%C3%A9"


class TestDecodeComponent:
    def test_decodes_escapes(self) -> None:
        assert decode_component("a%20b%2Fc", parameter="segments") == "a b/c"

    def test_stray_percent_is_kept(self) -> None:
        assert decode_component("100%", parameter="params") == "100%"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(ConnectionStringFormatError, match="in user"):
            decode_component("%C3", parameter="user")
