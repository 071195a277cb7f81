"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Application settings, locale, browser catalog and table labels
- logging: Structured logging configuration
"""
