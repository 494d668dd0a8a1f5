"""HTTP API for Deep Search."""
