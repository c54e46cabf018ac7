"""Scheduling rules."""
