"""Utility helpers for bibmarkup."""
