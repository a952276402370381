"""NegocIA - business-data analysis relay and dashboard."""

__version__ = "1.0.0"
