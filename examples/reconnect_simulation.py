"""
Reconnect Policy Example
========================

Replays a connect/disconnect history against each reconnect policy and
prints what a connection supervisor would do. No sockets are opened.
"""

from mqttoptions import ReconnectPolicy, ReconnectState
from mqttoptions.logging import set_level

set_level('ERROR')

# 'fail' = connection attempt failed, 'up' = connected, 'drop' = connection lost
EVENTS = ['fail', 'up', 'drop', 'up', 'drop']

for policy in (ReconnectPolicy.never(),
               ReconnectPolicy.after_first_success(10),
               ReconnectPolicy.always(3)):
    state = ReconnectState(policy)
    actions = []
    for event in EVENTS:
        if event == 'up':
            state.connected()
            actions.append('connected')
            continue
        delay = state.disconnected()
        actions.append('stop' if delay is None else 'retry in %ss' % delay)
    print('%-40r %s' % (policy, ', '.join(actions)))
