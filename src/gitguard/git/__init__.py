"""Thin wrappers around the git command line."""
