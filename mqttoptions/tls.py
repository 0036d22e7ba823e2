"""
Shared TLS configuration for MQTT connections.

A TlsConfiguration pairs the hostname used to verify the broker certificate
with an ssl.SSLContext. The context is built once and shared by every copy of
the wrapper, so repeated reconnect attempts reuse the loaded trust store and
client certificate. Nothing here mutates the context after construction.
"""

import ssl

from .errors import MQTTConfigError


class TlsConfiguration:
    """Hostname plus a shared, read-only SSLContext."""
    __slots__ = ('hostname', 'config')

    def __init__(self, hostname, config):
        if not isinstance(hostname, str) or not hostname:
            raise MQTTConfigError('TLS hostname must be a non-empty string', 'hostname', hostname)
        if not isinstance(config, ssl.SSLContext):
            raise MQTTConfigError(
                'TLS config must be an ssl.SSLContext, got %s' % type(config).__name__,
                'config', config)

        object.__setattr__(self, 'hostname', hostname)
        object.__setattr__(self, 'config', config)

    @classmethod
    def from_files(cls, hostname, cafile=None, certfile=None, keyfile=None):
        """Build a client context from PEM files.

        Args:
            hostname: name expected in the broker certificate
            cafile: CA bundle; system default trust store when None
            certfile: client certificate chain for mutual TLS
            keyfile: private key for certfile (if not bundled in certfile)

        Returns:
            TlsConfiguration
        """
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH, cafile=cafile)
        if certfile is not None:
            context.load_cert_chain(certfile, keyfile)
        return cls(hostname, context)

    def __setattr__(self, name, value):
        raise AttributeError('TlsConfiguration is immutable')

    def copy(self):
        """Return a new wrapper that shares this one's SSLContext."""
        return TlsConfiguration(self.hostname, self.config)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, TlsConfiguration):
            return NotImplemented
        return self.hostname == other.hostname and self.config is other.config

    def __hash__(self):
        return hash((self.hostname, id(self.config)))

    def __repr__(self):
        return 'TlsConfiguration(hostname=%r)' % self.hostname
