"""Compile, run and track small Rust exercises, plus worked lesson modules."""

__version__ = "5.2.1"