"""Signalboard HTTP API."""
