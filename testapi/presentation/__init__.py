"""Presentation layer - HTTP routers, middleware, error responses and mappers."""
