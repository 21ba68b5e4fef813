"""Delivery price computation engine."""
