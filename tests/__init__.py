"""Tests for the contacts backend.

Everything runs against the in-memory OpenSearch stand-in from
``conftest.py``; no cluster is required.
"""
