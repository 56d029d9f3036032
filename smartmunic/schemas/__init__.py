"""
Pydantic schemas package.

Request and response models for the HTTP API. All of them serialise to
camelCase keys.
"""
