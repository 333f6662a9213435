"""Presentation layer: HTTP routers, middleware and error responses."""
