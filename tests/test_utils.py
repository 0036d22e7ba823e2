"""Tests for mqttoptions.utils module."""

import pytest
from mqttoptions.utils import (
    MAX_STRING_LENGTH,
    encode_utf8_string,
    validate_topic_name,
    generate_client_id,
    is_number,
)


class TestEncodeUtf8String:
    """Test MQTT length-prefixed string encoding."""

    def test_encode_str(self):
        """Test encoding a str adds a 2-byte big-endian length."""
        assert encode_utf8_string('abc') == bytearray(b'\x00\x03abc')

    def test_encode_bytes(self):
        """Test bytes are encoded unchanged after the prefix."""
        assert encode_utf8_string(b'\x01\x02') == bytearray(b'\x00\x02\x01\x02')

    def test_encode_empty(self):
        """Test empty string encodes to a zero length."""
        assert encode_utf8_string('') == bytearray(b'\x00\x00')

    def test_encode_multibyte(self):
        """Test length counts UTF-8 bytes, not characters."""
        assert encode_utf8_string('é')[:2] == bytearray(b'\x00\x02')

    def test_encode_max_length(self):
        """Test 65535 bytes is accepted."""
        encoded = encode_utf8_string(b'x' * MAX_STRING_LENGTH)
        assert encoded[:2] == bytearray(b'\xff\xff')

    def test_encode_too_long(self):
        """Test strings longer than 65535 bytes are rejected."""
        with pytest.raises(ValueError, match='maximum length'):
            encode_utf8_string(b'x' * (MAX_STRING_LENGTH + 1))


class TestValidateTopicName:
    """Test topic name validation."""

    def test_valid_topic(self):
        """Test plain topic is valid."""
        assert validate_topic_name('devices/client-1/status') is True

    def test_valid_bytes_topic(self):
        """Test bytes topic is valid."""
        assert validate_topic_name(b'a/b') is True

    def test_empty_topic(self):
        """Test empty topic raises."""
        with pytest.raises(ValueError, match='cannot be empty'):
            validate_topic_name('')

    def test_plus_wildcard(self):
        """Test + wildcard is rejected."""
        with pytest.raises(ValueError, match='wildcards'):
            validate_topic_name('a/+/b')

    def test_hash_wildcard(self):
        """Test # wildcard is rejected."""
        with pytest.raises(ValueError, match='wildcards'):
            validate_topic_name('a/#')

    def test_null_character(self):
        """Test null character is rejected."""
        with pytest.raises(ValueError, match='null'):
            validate_topic_name('a\x00b')

    def test_custom_max_length(self):
        """Test max_length is enforced."""
        with pytest.raises(ValueError, match='maximum length'):
            validate_topic_name('abcdef', max_length=5)


class TestGenerateClientId:
    """Test client ID generation."""

    def test_format(self):
        """Test default prefix and 8 hex digits."""
        client_id = generate_client_id()
        prefix, suffix = client_id.split('-')
        assert prefix == 'mqttopts'
        assert len(suffix) == 8
        int(suffix, 16)

    def test_custom_prefix(self):
        """Test custom prefix is used."""
        assert generate_client_id('sensor').startswith('sensor-')

    def test_consecutive_ids_differ(self):
        """Test consecutive calls return different IDs."""
        assert generate_client_id() != generate_client_id()


class TestIsNumber:
    """Test numeric duration check."""

    def test_numbers(self):
        """Test int and float are numbers."""
        assert is_number(0)
        assert is_number(2.5)

    def test_non_numbers(self):
        """Test bool, None, str and NaN are not numbers."""
        for value in (True, None, '5', float('nan')):
            assert not is_number(value)
