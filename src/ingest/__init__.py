"""Data ingestion layer.

This module reads StatsWales CSV and JSON sources into the store.
Each supported layout has its own parser module.
"""
