"""Tests for ngpayroll."""
