"""Utility helpers package for IDs, timestamps, JSON I/O, and text.
"""
