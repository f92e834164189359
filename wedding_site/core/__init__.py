"""Core configuration, logging and shared models.

Contains:
- config.py: environment settings, site paths and the image allow-list
- log.py: logger construction and request logging middleware
- models_io.py: response schemas and the meta record used across routers
"""
