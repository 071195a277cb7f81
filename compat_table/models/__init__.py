"""
Data Models
===========

Pydantic data models for compat documents and render configuration.

Models:
- schemas: Support entries, feature records, document variants, labels and render context
"""
