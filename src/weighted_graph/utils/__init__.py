"""Utility helpers shared across the weighted graph package."""
