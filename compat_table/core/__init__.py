"""
Core Business Logic
==================

Core business logic modules for compat table generation.

Modules:
- compat: Compat document loading and shape discrimination
- rendering: Support classification, footnotes and HTML table generation
"""
