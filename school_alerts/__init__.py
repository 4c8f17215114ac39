"""Guardian alert feed service.

Ensures the local ``school_alerts`` package is resolved as a regular package.
"""
