"""A small terminal role-playing game: a title screen state machine and a turn-based goblin fight."""

__version__ = "0.1.0"