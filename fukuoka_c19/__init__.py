"""
Core package for the Fukuoka COVID-19 case dashboard.

Submodules provide data loading, aggregation, chart path construction and
user interface rendering helpers that are orchestrated by the top-level
`app.py` and the headless `cli` entry point.
"""
