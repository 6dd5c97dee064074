"""Realistic value generators used by the synthesizer."""
