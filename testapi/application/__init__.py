"""Application layer - commands, queries, handlers and CQRS dispatch."""
