"""Utilities — field validation helpers shared across recordkit."""
