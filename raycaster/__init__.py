"""A small recursive ray tracer with NumPy primitives, lighting and image output."""

__version__ = "0.1.0"