"""
Basic Client Options Example
============================

Builds connection options for a plain TCP broker.

This example demonstrates:
- Default options from a client id and broker address
- Chaining with_*() calls, each returning a new value
- A persistent session with a last will message
- Handling a rejected keep-alive
"""

from mqttoptions import ClientOptions, LastWill, MQTTConfigError, ReconnectPolicy

opts = (ClientOptions('sensor-01', '192.168.1.10:1883')
        .with_keep_alive(30)
        .with_clean_session(False)
        .with_max_packet_size(16)
        .with_reconnect_policy(ReconnectPolicy.always(5))
        .with_last_will(LastWill('sensors/sensor-01/status', 'offline', qos=1, retain=True)))

opts.validate()
print('[mqttoptions] %r' % opts)

try:
    opts.with_keep_alive(2)
except MQTTConfigError as e:
    print('[mqttoptions] Rejected %s=%r: %s' % (e.field, e.value, e.message))
