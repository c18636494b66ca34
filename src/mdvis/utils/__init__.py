#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helper utilities for mdvis."""
