"""
mqttoptions - connection options and reconnect policy for MQTT 3.1.1 clients

Inert configuration values handed to a connection manager: broker address,
keep-alive, session semantics, packet size limit, last will, TLS and
reconnect policy.
"""

__version__ = '1.0.0'
__author__ = 'mateuszsury'

from .options import ClientOptions
from .reconnect import ReconnectPolicy, ReconnectState
from .tls import TlsConfiguration
from .will import LastWill
from .errors import MQTTError, MQTTConfigError

# Convenience aliases
MqttOptions = ClientOptions
ReconnectOptions = ReconnectPolicy
TlsOptions = TlsConfiguration
