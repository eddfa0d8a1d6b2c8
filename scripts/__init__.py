"""Utility scripts for operating the contacts search index.

Scripts include:
- ``opensearch_bootstrap.py``: wait for the cluster and create the contacts index.
"""
