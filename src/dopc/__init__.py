"""Delivery Order Price Calculator service."""
