"""
pytest configuration and fixtures for mqttoptions tests.
"""

import ssl

import pytest

from mqttoptions.options import ClientOptions
from mqttoptions.reconnect import ReconnectPolicy
from mqttoptions.tls import TlsConfiguration
from mqttoptions.will import LastWill


@pytest.fixture
def options():
    """Default options for a plain TCP broker."""
    return ClientOptions('client-1', 'broker.example:1883')


@pytest.fixture
def ssl_context():
    """Client SSLContext with no certificates loaded."""
    return ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


@pytest.fixture
def tls_config(ssl_context):
    """TlsConfiguration for broker.example."""
    return TlsConfiguration('broker.example', ssl_context)


@pytest.fixture
def last_will():
    """QoS 1 retained offline notice."""
    return LastWill('devices/client-1/status', b'offline', qos=1, retain=True)


@pytest.fixture
def never_policy():
    return ReconnectPolicy.never()
