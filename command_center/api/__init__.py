"""HTTP API for the command center."""
