"""slotbook - personal time slots that convert into meetings."""

__version__ = "0.1.0"
