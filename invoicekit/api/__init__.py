"""HTTP API: the remote invoice service and PDF endpoints."""
