"""Validation result models."""
