"""Unit tests for manifest value normalization."""

import pytest

from apkscope.core.normalize import (
    FALSE_TOKEN,
    TRUE_TOKEN,
    is_tri_state_token,
    normalize_gpu_version,
    normalize_hex_integer,
    normalize_tri_state_bool,
)
from apkscope.exceptions import ApkScopeError, FormatError


class TestTriStateBool:
    """Tests for hex boolean decoding."""

    def test_false_token_is_false(self):
        assert normalize_tri_state_bool(FALSE_TOKEN) is False

    def test_true_token_is_true(self):
        assert normalize_tri_state_bool(TRUE_TOKEN) is True

    @pytest.mark.parametrize("raw", ["0x1", "0x00", "false", "", "garbage", "0X0"])
    def test_anything_but_false_token_is_true(self, raw):
        """Unrecognized tokens decode to True rather than raising."""
        assert normalize_tri_state_bool(raw) is True

    def test_token_detection(self):
        assert is_tri_state_token(FALSE_TOKEN)
        assert is_tri_state_token(TRUE_TOKEN)
        assert not is_tri_state_token("0x1")
        assert not is_tri_state_token("true")


class TestHexInteger:
    """Tests for hex integer decoding."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0x1a", 26), ("0X1A", 26), ("1a", 26), ("0x15", 21), ("0x0", 0)],
    )
    def test_decodes_hex(self, raw, expected):
        assert normalize_hex_integer(raw) == expected

    @pytest.mark.parametrize("raw", ["zz", "", "0x", "1_a", "-0x1", " 0x1a", "21.0"])
    def test_rejects_non_hex(self, raw):
        with pytest.raises(FormatError) as exc_info:
            normalize_hex_integer(raw)
        assert exc_info.value.value == raw

    def test_format_error_is_apkscope_error(self):
        with pytest.raises(ApkScopeError):
            normalize_hex_integer("not-hex")


class TestGpuVersion:
    """Tests for GL ES version rendering."""

    def test_encoding_ending_in_zero_gets_minor_suffix(self):
        # digits of "0x20000" without zeros: "2"; trailing "0" adds ".0"
        assert normalize_gpu_version("0x20000") == "Open GL 2.0"

    def test_encoding_ending_in_nonzero_digit(self):
        # digits of "0x20001" without zeros: "2", "1" joined with "."
        assert normalize_gpu_version("0x20001") == "Open GL 2.1"

    def test_padded_decoder_rendering(self):
        assert normalize_gpu_version("0x00030000") == "Open GL 3.0"
        assert normalize_gpu_version("0x00030001") == "Open GL 3.1"

    def test_quirk_is_not_a_general_version_parser(self):
        # Inner zeros are dropped too
        assert normalize_gpu_version("0x30010") == "Open GL 3.1.0"
