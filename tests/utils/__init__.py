"""Test utilities"""

from .recording_visitor import ALL_KINDS, LIST_KINDS, NODE_KINDS, RecordingVisitor


__all__ = ["ALL_KINDS", "LIST_KINDS", "NODE_KINDS", "RecordingVisitor"]
