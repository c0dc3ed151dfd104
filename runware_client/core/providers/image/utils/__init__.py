"""Utility helpers for image providers."""
