"""Textwiki - a minimal web-based page editor."""
