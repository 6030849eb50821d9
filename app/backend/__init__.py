"""
Illustration Comparison Backend Application.

A FastAPI service that extracts key figures from financial illustration
PDFs, compares them in a sortable/filterable table and exports the table
as a PDF report.
"""

__version__ = "1.0.0"
