"""Utility helpers for doxtree."""
