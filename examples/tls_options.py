"""
TLS Client Options Example
==========================

Connects through a load balancer address while verifying the broker's
certificate hostname, with mutual TLS.

This example demonstrates:
- Building one SSLContext from PEM files
- Reusing the same TlsConfiguration across several option values
"""

import sys

from mqttoptions import ClientOptions, TlsConfiguration

if len(sys.argv) < 4:
    print('usage: tls_options.py CA_FILE CERT_FILE KEY_FILE')
    sys.exit(1)

tls = TlsConfiguration.from_files(
    'mqtt.example.com',
    cafile=sys.argv[1],
    certfile=sys.argv[2],
    keyfile=sys.argv[3],
)

primary = ClientOptions('gateway-a', '10.20.0.4:8883').with_tls(tls)
backup = ClientOptions('gateway-a', '10.20.0.5:8883').with_tls(tls)

print('[mqttoptions] Shared context: %s' % (primary.tls.config is backup.tls.config))
