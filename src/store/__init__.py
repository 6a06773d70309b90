"""Dataset storage layer.

This package persists named record datasets and reads them back
for the SDK and HTTP layers.
"""
