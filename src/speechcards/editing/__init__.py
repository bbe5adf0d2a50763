"""Structural editing of outline trees."""
