"""Core of the inspector: view state machine and fetch dispatch.

- requests.py: commands emitted by transitions (fetch requests, quit)
- events.py: key presses and fetch completion events
- transitions.py: pure ``transition(session, event)`` function
- dispatcher.py: deferred execution of fetch requests
"""

from etcdview.core.dispatcher import FetchDispatcher
from etcdview.core.transitions import handles_key, start, transition

__all__ = [
    "FetchDispatcher",
    "handles_key",
    "start",
    "transition",
]
