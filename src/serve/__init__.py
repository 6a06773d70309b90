"""HTTP request layer.

This package adapts the SDK to the browser client's JSON routes and
maps result error kinds onto HTTP statuses.
"""
