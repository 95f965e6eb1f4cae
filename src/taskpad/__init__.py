"""Local to-do list manager with durable key-value storage."""

__version__ = "0.1.0"
