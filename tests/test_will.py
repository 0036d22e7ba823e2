"""Tests for mqttoptions.will module."""

import copy

import pytest
from mqttoptions.errors import MQTTConfigError
from mqttoptions.will import LastWill, WILL_FLAG, WILL_RETAIN


class TestLastWillInit:
    """Test LastWill construction and validation."""

    def test_defaults(self):
        """Test default message, QoS and retain."""
        will = LastWill('status')
        assert will.topic == 'status'
        assert will.message == b''
        assert will.qos == 0
        assert will.retain is False

    def test_str_message_encoded(self):
        """Test str message is stored as UTF-8 bytes."""
        assert LastWill('status', 'offline').message == b'offline'

    def test_bytes_topic_decoded(self):
        """Test bytes topic is stored as str."""
        assert LastWill(b'status').topic == 'status'

    def test_wildcard_topic_rejected(self):
        """Test will topic cannot contain wildcards."""
        with pytest.raises(MQTTConfigError, match='Invalid will topic') as exc_info:
            LastWill('devices/+/status')
        assert exc_info.value.field == 'topic'

    def test_empty_topic_rejected(self):
        """Test empty will topic is rejected."""
        with pytest.raises(MQTTConfigError):
            LastWill('')

    def test_invalid_utf8_topic_rejected(self):
        """Test undecodable bytes topic raises MQTTConfigError."""
        with pytest.raises(MQTTConfigError, match='Invalid will topic') as exc_info:
            LastWill(b'\xff\xfe')
        assert exc_info.value.field == 'topic'

    def test_invalid_qos(self):
        """Test QoS outside 0-2 is rejected."""
        with pytest.raises(MQTTConfigError, match='Will QoS must be 0, 1 or 2'):
            LastWill('status', qos=3)

    def test_message_too_large(self):
        """Test message over 65535 bytes is rejected."""
        with pytest.raises(MQTTConfigError, match='exceeds'):
            LastWill('status', b'x' * 65536)

    def test_immutable(self, last_will):
        """Test attributes cannot be reassigned."""
        with pytest.raises(AttributeError):
            last_will.qos = 0


class TestLastWillEncoding:
    """Test CONNECT flag bits and payload fields."""

    def test_connect_flags_qos0(self):
        """Test QoS 0 non-retained will sets only the will flag."""
        assert LastWill('status').connect_flags() == WILL_FLAG

    def test_connect_flags_qos1_retain(self, last_will):
        """Test QoS 1 retained will sets QoS bits and retain."""
        assert last_will.connect_flags() == WILL_FLAG | (1 << 3) | WILL_RETAIN

    def test_connect_flags_qos2(self):
        """Test QoS 2 is shifted into bits 3-4."""
        assert LastWill('status', qos=2).connect_flags() == 0x14

    def test_encode(self):
        """Test topic and message are length-prefixed in order."""
        will = LastWill('a/b', b'bye')
        assert will.encode() == bytearray(b'\x00\x03a/b\x00\x03bye')


class TestLastWillEquality:
    """Test value semantics."""

    def test_equal(self):
        """Test wills with the same fields are equal and hash alike."""
        a = LastWill('status', 'offline', qos=1)
        b = LastWill('status', b'offline', qos=1)
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal(self):
        """Test differing retain flag breaks equality."""
        assert LastWill('status', retain=True) != LastWill('status')

    def test_repr(self, last_will):
        """Test repr names the topic."""
        assert 'devices/client-1/status' in repr(last_will)

    def test_copy(self, last_will):
        """copy rebuilds through the constructor."""
        assert copy.copy(last_will) == last_will
