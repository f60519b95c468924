"""Photosquid - The interaction engine of a 2D shape editor.

Photosquid turns raw pointer and keyboard events into snapped, smoothly
animated edits of circles, rectangles and triangles. Events are offered to
the selected shapes, the active tool and the context menu in priority
order, and edits are recorded in an undo/redo history.

Example:
    $ photosquid replay session.json

This replays the recorded events of session.json and prints the shapes
they produce.
"""

__version__ = "0.1.0"
__author__ = "Photosquid contributors"

__all__ = ["__author__", "__version__"]
