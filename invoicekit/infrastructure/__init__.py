"""Infrastructure layer - storage, remote API client and PDF backend."""
