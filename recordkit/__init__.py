"""recordkit — an in-memory record registry with export and project scaffolding."""

__version__ = "0.1.0"
