"""Load, compile, run and track Rust exercises, with worked solutions."""

__version__ = "5.5.1"