"""HTTP API for the swap quote engine."""
