"""Application layer - demo context, catalogue and runner."""
