"""
models/ - Domain Models
=======================
Plain dataclasses mapped to database rows.
"""
