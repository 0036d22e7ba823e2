"""
Last will message carried by the CONNECT packet.

The broker publishes this message on the client's behalf when the connection
drops without a DISCONNECT.
"""

from .errors import MQTTConfigError
from .utils import MAX_STRING_LENGTH, encode_utf8_string, validate_topic_name

# CONNECT flag bits (MQTT §3.1.2.3)
WILL_FLAG = 0x04
WILL_QOS_SHIFT = 3
WILL_RETAIN = 0x20


class LastWill:
    """Immutable will message: topic, payload, QoS and retain flag."""
    __slots__ = ('topic', 'message', 'qos', 'retain')

    def __init__(self, topic, message=b'', qos=0, retain=False):
        try:
            validate_topic_name(topic)
            if isinstance(topic, bytes):
                topic = topic.decode('utf-8')
        except ValueError as e:
            raise MQTTConfigError('Invalid will topic: %s' % e, 'topic', topic)

        if qos not in (0, 1, 2):
            raise MQTTConfigError('Will QoS must be 0, 1 or 2, got %r' % (qos,), 'qos', qos)

        if isinstance(message, str):
            message = message.encode('utf-8')
        else:
            message = bytes(message)
        if len(message) > MAX_STRING_LENGTH:
            raise MQTTConfigError(
                'Will message exceeds %d bytes' % MAX_STRING_LENGTH,
                'message', len(message))

        object.__setattr__(self, 'topic', topic)
        object.__setattr__(self, 'message', message)
        object.__setattr__(self, 'qos', qos)
        object.__setattr__(self, 'retain', bool(retain))

    def __setattr__(self, name, value):
        raise AttributeError('LastWill is immutable')

    def __reduce__(self):
        return (LastWill, (self.topic, self.message, self.qos, self.retain))

    def connect_flags(self):
        """Return the will bits of the CONNECT flags byte."""
        flags = WILL_FLAG | (self.qos << WILL_QOS_SHIFT)
        if self.retain:
            flags |= WILL_RETAIN
        return flags

    def encode(self):
        """Encode the will topic and message fields of the CONNECT payload."""
        result = encode_utf8_string(self.topic)
        result.extend(encode_utf8_string(self.message))
        return result

    def __eq__(self, other):
        if not isinstance(other, LastWill):
            return NotImplemented
        return (self.topic == other.topic and self.message == other.message
                and self.qos == other.qos and self.retain == other.retain)

    def __hash__(self):
        return hash((self.topic, self.message, self.qos, self.retain))

    def __repr__(self):
        return 'LastWill(topic=%r, message=%r, qos=%d, retain=%s)' % (
            self.topic, self.message, self.qos, self.retain)
