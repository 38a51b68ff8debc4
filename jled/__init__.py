"""Non-blocking LED effects driven by a millisecond clock."""

__version__ = "1.0.0"

__all__ = ["effects", "functions", "hal", "led", "morse", "sequence"]