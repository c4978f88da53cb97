"""User-facing timing interfaces built on IntervalTracker."""
from .decorators import track, track_block
