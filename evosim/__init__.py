"""A predator-prey evolution simulation with a live pygame view."""

__version__ = "0.1.0"