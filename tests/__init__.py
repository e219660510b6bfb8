"""Tests for shortlink."""
