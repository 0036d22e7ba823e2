"""
Reconnection policy for MQTT clients.

ReconnectPolicy says whether and when a client should reconnect after the
connection drops. ReconnectState applies a policy to a stream of connect and
disconnect events and returns the delay a supervisor should wait before the
next attempt. Neither sleeps nor owns timers.
"""

from .errors import MQTTConfigError
from .logging import get_logger
from .utils import is_number

_log = get_logger('reconnect')

_KIND_NAMES = {0: 'Never', 1: 'AfterFirstSuccess', 2: 'Always'}


class ReconnectPolicy:
    """Immutable reconnect rule: Never, AfterFirstSuccess(interval) or Always(interval).

    The interval is in seconds. Build instances through the classmethods.
    """
    __slots__ = ('kind', 'interval')

    NEVER = 0
    AFTER_FIRST_SUCCESS = 1
    ALWAYS = 2

    def __init__(self, kind, interval=None):
        if kind not in _KIND_NAMES:
            raise MQTTConfigError('Unknown reconnect policy kind: %r' % (kind,), 'kind', kind)

        if kind == ReconnectPolicy.NEVER:
            interval = None
        elif not is_number(interval) or interval < 0:
            raise MQTTConfigError(
                'Reconnect interval must be >= 0, got %r' % (interval,),
                'interval', interval)

        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'interval', interval)

    @classmethod
    def never(cls):
        return cls(cls.NEVER)

    @classmethod
    def after_first_success(cls, interval):
        return cls(cls.AFTER_FIRST_SUCCESS, interval)

    @classmethod
    def always(cls, interval):
        return cls(cls.ALWAYS, interval)

    def __setattr__(self, name, value):
        raise AttributeError('ReconnectPolicy is immutable')

    def __reduce__(self):
        return (ReconnectPolicy, (self.kind, self.interval))

    def retry_delay(self, has_connected):
        """Delay before the next attempt after a disconnect, or None to stop.

        Args:
            has_connected: True if a connection under this policy has succeeded
        """
        if self.kind == ReconnectPolicy.ALWAYS:
            return self.interval
        if self.kind == ReconnectPolicy.AFTER_FIRST_SUCCESS and has_connected:
            return self.interval
        return None

    def __eq__(self, other):
        if not isinstance(other, ReconnectPolicy):
            return NotImplemented
        return self.kind == other.kind and self.interval == other.interval

    def __hash__(self):
        return hash((self.kind, self.interval))

    def __repr__(self):
        if self.kind == ReconnectPolicy.NEVER:
            return 'ReconnectPolicy.Never'
        return 'ReconnectPolicy.%s(%r)' % (_KIND_NAMES[self.kind], self.interval)


class ReconnectState:
    """Tracks connection history for one policy and decides on retries."""
    __slots__ = ('policy', 'has_connected', 'connections', 'retries')

    def __init__(self, policy):
        self.policy = policy
        self.has_connected = False
        self.connections = 0
        self.retries = 0   # consecutive retries since the last success

    def connected(self):
        """Record a successful connection."""
        self.has_connected = True
        self.connections += 1
        self.retries = 0

    def disconnected(self):
        """Record a disconnect or failed attempt.

        Returns:
            Seconds to wait before reconnecting, or None if the client should stop
        """
        delay = self.policy.retry_delay(self.has_connected)
        if delay is None:
            _log.warning('Not reconnecting (policy %r, connected before: %s)',
                         self.policy, self.has_connected)
            return None

        self.retries += 1
        _log.info('Reconnect attempt %d scheduled in %ss', self.retries, delay)
        return delay

    def reset(self):
        self.has_connected = False
        self.connections = 0
        self.retries = 0

    def __repr__(self):
        return 'ReconnectState(policy=%r, connections=%d, retries=%d)' % (
            self.policy, self.connections, self.retries)
