"""HTTP API for the Question Bank service."""
