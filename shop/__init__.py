"""Customer registration and order placement backend."""
