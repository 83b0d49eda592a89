"""Infrastructure layer - adapters for persistence, logging and HTTP clients."""
