"""
Action base class

An Action describes one intended operation plus the callback that receives
its outcome. Each family (orders, notes, stats) has its own base class; the
Dispatcher routes on the family.
"""
from typing import Any, Callable, Optional

# on_completion(result, error): exactly one of the two is None
Completion = Callable[[Optional[Any], Optional[Exception]], None]


class Action:
    """Base class for every action family"""
