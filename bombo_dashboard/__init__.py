"""
Core package for the BOMBO key metrics dashboard.

Submodules provide the static metrics table, derived views, display
formatters and the Streamlit section renderers that are orchestrated by the
top-level `app.py`.
"""
