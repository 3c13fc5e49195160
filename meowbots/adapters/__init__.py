"""Adapters — Discord, storage and web implementations of the ports."""
