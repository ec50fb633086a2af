"""
viral_dash
----------
Single-player arcade game: dodge rival hazards, gather data packets,
laser the rivals and reach the target zone to advance through levels.
"""

__version__ = "1.0.0"
