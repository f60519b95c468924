"""Script I/O layer for photosquid.

This module reads recorded interaction scripts (JSON lists of input
events) and replays them into an Editor without a window.

Key responsibilities:
- Validate script files with pydantic
- Drive an Editor with a manual clock

Key classes:
- ScriptRunner: Replay events into an Editor
- ManualClock: Clock advanced by ``wait`` events
"""

from photosquid.io.script import (
    ManualClock,
    ScriptEvent,
    ScriptRunner,
    load_script,
    parse_script,
)

__all__ = [
    "ManualClock",
    "ScriptEvent",
    "ScriptRunner",
    "load_script",
    "parse_script",
]
