"""Middleware package for FastAPI request/response processing.

This package contains middleware that emits request stats through the
active stats receiver.
"""
