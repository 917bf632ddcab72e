"""Test suite for SimLab."""
