"""Domain building blocks and driver-agnostic database persistence for SaaS back ends."""

__version__ = "0.1.31"