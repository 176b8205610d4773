"""GitHub URL parsing and API access."""
