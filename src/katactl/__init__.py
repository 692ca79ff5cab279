"""katactl — small programming exercises behind one CLI."""

__version__ = "0.1.0"
