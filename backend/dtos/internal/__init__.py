"""
Internal DTOs

Row-level DTOs produced by query repositories and folded into response DTOs
before they leave the backend. These are not exposed to external APIs.
"""
