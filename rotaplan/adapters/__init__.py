"""Input/output adapters: configuration files and report writers."""
