"""
Core app - Shared abstractions and utilities.

This app provides the pieces every API app builds on:
- Error taxonomy (ServiceError and its subclasses)
- Response envelopes ({success, data} / {success, error})
- The centralized exception boundary for the NinjaAPI
"""
