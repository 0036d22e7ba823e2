"""
MQTT client connection options.

ClientOptions collects everything a connection manager needs to open a
session: broker address, client identity, timing, session semantics, packet
size limit, last will, TLS and reconnect policy. Each with_*() call returns a
new ClientOptions and leaves the receiver untouched, so a finished value can be
handed to the connection manager and shared freely.
"""

from .errors import MQTTConfigError
from .logging import get_logger
from .reconnect import ReconnectPolicy
from .tls import TlsConfiguration
from .utils import generate_client_id, is_number
from .will import LastWill

_log = get_logger('options')

MIN_KEEP_ALIVE = 5
MAX_KEEP_ALIVE = 65535

DEFAULT_KEEP_ALIVE = 10
DEFAULT_CONNECTION_TIMEOUT = 5
DEFAULT_RECONNECT_INTERVAL = 10
DEFAULT_MAX_PACKET_SIZE = 100 * 1024

_FIELDS = (
    'broker_addr', 'keep_alive', 'clean_session', 'client_id',
    'mqtt_connection_timeout', 'reconnect', 'max_packet_size',
    'last_will', 'tls',
)

_RECONNECT_MODES = {
    'never': ReconnectPolicy.NEVER,
    'after_first_success': ReconnectPolicy.AFTER_FIRST_SUCCESS,
    'always': ReconnectPolicy.ALWAYS,
}


def _check_keep_alive(seconds):
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise MQTTConfigError(
            'keep_alive must be an integer number of seconds, got %r' % (seconds,),
            'keep_alive', seconds)
    if seconds < MIN_KEEP_ALIVE:
        raise MQTTConfigError(
            'keep_alive must be >= %d secs, got %d' % (MIN_KEEP_ALIVE, seconds),
            'keep_alive', seconds)
    if seconds > MAX_KEEP_ALIVE:
        raise MQTTConfigError(
            'keep_alive must be <= %d secs, got %d' % (MAX_KEEP_ALIVE, seconds),
            'keep_alive', seconds)


def _check_connection_timeout(seconds):
    if not is_number(seconds) or seconds <= 0:
        raise MQTTConfigError(
            'mqtt_connection_timeout must be > 0, got %r' % (seconds,),
            'mqtt_connection_timeout', seconds)


def _restore(cls, fields):
    opts = cls(fields['client_id'], fields['broker_addr'])
    return opts._replace(**fields)


class ClientOptions:
    """Connection parameters for one MQTT client.

    Defaults: keep_alive 10 s, clean session, 5 s CONNACK timeout,
    reconnect AfterFirstSuccess(10 s), 100 KB max packet size, no last will,
    no TLS.

    client_id and broker_addr are taken as given. When clean_session is False
    the broker keys the stored session on client_id, so the caller must keep it
    stable across reconnects.
    """
    __slots__ = _FIELDS

    def __init__(self, client_id, broker_addr):
        # TODO: validate client_id and broker_addr once the accepted formats are decided
        object.__setattr__(self, 'broker_addr', broker_addr)
        object.__setattr__(self, 'keep_alive', DEFAULT_KEEP_ALIVE)
        object.__setattr__(self, 'clean_session', True)
        object.__setattr__(self, 'client_id', client_id)
        object.__setattr__(self, 'mqtt_connection_timeout', DEFAULT_CONNECTION_TIMEOUT)
        object.__setattr__(self, 'reconnect',
                           ReconnectPolicy.after_first_success(DEFAULT_RECONNECT_INTERVAL))
        object.__setattr__(self, 'max_packet_size', DEFAULT_MAX_PACKET_SIZE)
        object.__setattr__(self, 'last_will', None)
        object.__setattr__(self, 'tls', None)

    def __setattr__(self, name, value):
        raise AttributeError('ClientOptions is immutable, use the with_*() methods')

    def _replace(self, **changes):
        new = object.__new__(type(self))
        for name in _FIELDS:
            object.__setattr__(new, name, changes.get(name, getattr(self, name)))
        return new

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        fields = dict((name, getattr(self, name)) for name in _FIELDS)
        return (_restore, (type(self), fields))

    def with_keep_alive(self, seconds):
        """Set the idle time after which the client pings the broker.

        Args:
            seconds: 5-65535, or None to disable keep-alive pings

        Raises:
            MQTTConfigError: if seconds is below 5 or above 65535
        """
        if seconds is not None:
            _check_keep_alive(seconds)
        _log.debug('keep_alive=%s', seconds)
        return self._replace(keep_alive=seconds)

    def with_max_packet_size(self, kilobytes):
        """Set the packet size limit in kilobytes (stored in bytes)."""
        if isinstance(kilobytes, bool) or not isinstance(kilobytes, int):
            raise MQTTConfigError(
                'max_packet_size must be an integer number of kilobytes, got %r' % (kilobytes,),
                'max_packet_size', kilobytes)
        if kilobytes < 0:
            raise MQTTConfigError(
                'max_packet_size must be >= 0, got %d' % kilobytes,
                'max_packet_size', kilobytes)
        _log.debug('max_packet_size=%d KB', kilobytes)
        return self._replace(max_packet_size=kilobytes * 1024)

    def with_clean_session(self, clean_session):
        """Choose a clean or persistent session.

        With clean_session=True the broker drops all client state on
        disconnect. With False it keeps subscriptions and pending messages and
        resumes them when the same client_id reconnects, so set client_id
        explicitly in that case.
        """
        clean_session = bool(clean_session)
        if not clean_session and not self.client_id:
            _log.warning('Persistent session requested with an empty client_id; '
                         'the broker cannot resume it')
        _log.debug('clean_session=%s', clean_session)
        return self._replace(clean_session=clean_session)

    def with_reconnect_policy(self, policy):
        """Set when the client retries after a disconnect."""
        if not isinstance(policy, ReconnectPolicy):
            raise MQTTConfigError('reconnect must be a ReconnectPolicy', 'reconnect', policy)
        _log.debug('reconnect=%r', policy)
        return self._replace(reconnect=policy)

    def with_tls(self, tls):
        """Set or clear (None) the TLS configuration."""
        if tls is not None and not isinstance(tls, TlsConfiguration):
            raise MQTTConfigError('tls must be a TlsConfiguration or None', 'tls', tls)
        _log.debug('tls=%r', tls)
        return self._replace(tls=tls)

    def with_last_will(self, will):
        """Set or clear (None) the message the broker publishes if this client drops."""
        if will is not None and not isinstance(will, LastWill):
            raise MQTTConfigError('last_will must be a LastWill or None', 'last_will', will)
        _log.debug('last_will=%r', will)
        return self._replace(last_will=will)

    def with_connection_timeout(self, seconds):
        """Set how long the broker has to answer CONNECT with CONNACK."""
        _check_connection_timeout(seconds)
        _log.debug('mqtt_connection_timeout=%s', seconds)
        return self._replace(mqtt_connection_timeout=seconds)

    def validate(self):
        """Validate every field.

        Raises:
            MQTTConfigError: on the first invalid field.
        """
        if self.keep_alive is not None:
            _check_keep_alive(self.keep_alive)

        _check_connection_timeout(self.mqtt_connection_timeout)

        if self.max_packet_size < 0:
            raise MQTTConfigError(
                'max_packet_size must be >= 0, got %d' % self.max_packet_size,
                'max_packet_size', self.max_packet_size)

        if not isinstance(self.reconnect, ReconnectPolicy):
            raise MQTTConfigError('reconnect must be a ReconnectPolicy', 'reconnect', self.reconnect)

        if self.tls is not None and not isinstance(self.tls, TlsConfiguration):
            raise MQTTConfigError('tls must be a TlsConfiguration or None', 'tls', self.tls)

        if self.last_will is not None and not isinstance(self.last_will, LastWill):
            raise MQTTConfigError('last_will must be a LastWill or None', 'last_will', self.last_will)

    @classmethod
    def from_dict(cls, data):
        """Build options from a plain mapping such as a parsed JSON file.

        Recognised keys: client_id, broker_addr, keep_alive, clean_session,
        connection_timeout, max_packet_size_kb, reconnect
        ({"mode": ..., "interval": ...}) and last_will
        ({"topic", "message", "qos", "retain"}). Unknown keys are ignored.
        A missing client_id is generated.

        Raises:
            MQTTConfigError: if broker_addr is missing or a value is invalid.
        """
        broker_addr = data.get('broker_addr')
        if not broker_addr:
            raise MQTTConfigError('broker_addr is required', 'broker_addr', broker_addr)

        client_id = data.get('client_id')
        if client_id is None:
            client_id = generate_client_id()

        opts = cls(client_id, broker_addr)

        if 'keep_alive' in data:
            opts = opts.with_keep_alive(data['keep_alive'])
        if 'clean_session' in data:
            opts = opts.with_clean_session(data['clean_session'])
        if 'connection_timeout' in data:
            opts = opts.with_connection_timeout(data['connection_timeout'])
        if 'max_packet_size_kb' in data:
            opts = opts.with_max_packet_size(data['max_packet_size_kb'])

        reconnect = data.get('reconnect')
        if reconnect is not None:
            if not isinstance(reconnect, dict):
                raise MQTTConfigError(
                    'reconnect must be a mapping with mode and interval, got %r' % (reconnect,),
                    'reconnect', reconnect)
            mode = reconnect.get('mode')
            if mode not in _RECONNECT_MODES:
                raise MQTTConfigError(
                    'reconnect mode must be one of %s, got %r' % (tuple(sorted(_RECONNECT_MODES)), mode),
                    'reconnect', mode)
            opts = opts.with_reconnect_policy(
                ReconnectPolicy(_RECONNECT_MODES[mode], reconnect.get('interval')))

        will = data.get('last_will')
        if will is not None:
            if not isinstance(will, dict):
                raise MQTTConfigError(
                    'last_will must be a mapping with a topic, got %r' % (will,),
                    'last_will', will)
            if 'topic' not in will:
                raise MQTTConfigError('last_will requires a topic', 'last_will', will)
            opts = opts.with_last_will(LastWill(
                will['topic'],
                will.get('message', b''),
                will.get('qos', 0),
                will.get('retain', False)))

        return opts

    def __eq__(self, other):
        if not isinstance(other, ClientOptions):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in _FIELDS)

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in _FIELDS))

    def __repr__(self):
        return 'ClientOptions(%s)' % ', '.join(
            '%s=%r' % (name, getattr(self, name)) for name in _FIELDS)
