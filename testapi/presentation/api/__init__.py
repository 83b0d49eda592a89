"""HTTP API (FastAPI routers and middleware)."""
