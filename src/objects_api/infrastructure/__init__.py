"""Infrastructure layer - HTTP transport and clients."""
