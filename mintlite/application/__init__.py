"""Application layer: CQRS commands, queries, handlers and DTOs."""
