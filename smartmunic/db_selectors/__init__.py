"""
Read-only query helpers shared by services and routes.
"""
