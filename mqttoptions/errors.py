"""
mqttoptions exception hierarchy

Errors raised while building or validating MQTT client connection options.
Uses __slots__ like the rest of the package.
"""


class MQTTError(Exception):
    """Base exception for all mqttoptions errors."""
    __slots__ = ('message',)

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class MQTTConfigError(MQTTError, ValueError):
    """Rejected configuration value.

    Carries the name of the offending field and the value that was refused,
    so callers can report or correct it.
    """
    __slots__ = ('field', 'value')

    def __init__(self, message, field=None, value=None):
        super().__init__(message)
        self.field = field
        self.value = value
