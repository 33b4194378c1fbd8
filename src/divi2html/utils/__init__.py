"""Utility helpers for divi2html."""
