"""Test suite for platewords."""
