"""Recurrence expansion: occurrence generation, resolution and export."""
