"""Test suite for Vinculum."""
