"""A simulated real-time kernel: ordered lists, initial stack frames, task control blocks and a round-robin scheduler."""

__version__ = "0.1.0"
__all__ = ["lists", "port", "task", "demo"]