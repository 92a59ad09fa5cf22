"""
Core package for the vertical dashboards application.

Submodules hold the vertical catalog, threshold classification, data access,
dashboard builders, and the user interface rendering helpers that are
orchestrated by the top-level `app.py`.
"""
