"""Equipment tracking API for an institutional IT department.

``equiptrack.main`` builds the FastAPI application; the packages underneath
split the work the usual way: ``models`` for tables, ``schemas`` for the
camelCase JSON shapes, ``crud`` for persistence rules, ``services`` for the
timeline and summary logic and ``routers`` for the HTTP surface.
"""

__version__ = "1.0.0"
