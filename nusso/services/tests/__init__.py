"""Tests for :mod:`nusso.services`."""
