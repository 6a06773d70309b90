"""Credential lookup for the login endpoint.

This module checks username/password pairs against a separately
maintained CSV list. It issues no sessions.
"""
