"""
utils/ - Cross-cutting helpers
==============================
Logging setup and the error types shared by every layer.
"""
