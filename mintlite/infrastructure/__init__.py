"""Infrastructure adapters: persistence, market data, events and logging."""
