"""Upload ingestion pipeline.

This package detects, decodes, validates, and canonicalizes uploaded
CSV and JSON files before handing records to the store layer.
"""
