"""Test API - lifecycle service for synthetic test users."""
