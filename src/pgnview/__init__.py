"""pgnview — PGN game parsing, serialization and ECO opening lookup."""

__version__ = "0.1.0"
