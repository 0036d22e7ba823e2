"""
mqttoptions utility functions.

MQTT 3.1.1 string encoding and validation helpers shared by the option types.
"""

import struct
import time

# Largest length a 2-byte MQTT length prefix can express (MQTT §1.5.3)
MAX_STRING_LENGTH = 65535


def encode_utf8_string(s):
    """Encode MQTT UTF-8 string with length prefix.

    Args:
        s: str or bytes

    Returns:
        bytearray with 2-byte big-endian length + encoded string

    Raises:
        ValueError if the encoded string is longer than 65535 bytes
    """
    if isinstance(s, str):
        s = s.encode('utf-8')
    if len(s) > MAX_STRING_LENGTH:
        raise ValueError("String exceeds maximum length of %d bytes" % MAX_STRING_LENGTH)
    result = bytearray(struct.pack('!H', len(s)))
    result.extend(s)
    return result


def validate_topic_name(topic, max_length=MAX_STRING_LENGTH):
    """Validate MQTT topic name (for PUBLISH and will messages).

    Args:
        topic: bytes or str
        max_length: maximum allowed length in bytes

    Returns:
        True if valid

    Raises:
        ValueError if invalid
    """
    if isinstance(topic, str):
        topic = topic.encode('utf-8')

    if not topic:
        raise ValueError("Topic name cannot be empty")
    if len(topic) > max_length:
        raise ValueError("Topic name exceeds maximum length")
    if b'+' in topic or b'#' in topic:
        raise ValueError("Topic name cannot contain wildcards")
    if b'\x00' in topic:
        raise ValueError("Topic name cannot contain null characters")

    return True


_client_id_counter = 0


def generate_client_id(prefix="mqttopts"):
    """Generate a client ID for connecting to a broker.

    Uses a module-level counter XORed with a time seed to avoid collisions.

    Returns:
        str in format "<prefix>-XXXXXXXX"
    """
    global _client_id_counter
    _client_id_counter += 1

    try:
        # MicroPython
        seed = time.ticks_ms() ^ (time.ticks_cpu() & 0xFFFFFFFF)
    except AttributeError:
        # CPython fallback
        seed = int(time.time() * 1000)

    return "%s-%08x" % (prefix, (seed ^ _client_id_counter) & 0xFFFFFFFF)


def is_number(value):
    """True for int or float values other than bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == value
