"""CheckmateIQ: annotate chess games read from screenshots or pasted text."""

__version__ = "0.1.0"
