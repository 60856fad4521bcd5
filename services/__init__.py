"""
services/ - Business Logic Layer
================================
Services orchestrate repositories and schema setup, and build
the text shown to the user.
"""
