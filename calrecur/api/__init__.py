"""HTTP API for calrecur."""
