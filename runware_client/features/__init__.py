"""Caller-facing features built on the core providers."""
