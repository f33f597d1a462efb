"""Application layer - use cases over the route domain."""
