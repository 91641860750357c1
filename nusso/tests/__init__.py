"""Tests for :mod:`nusso`."""
