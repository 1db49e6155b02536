"""NutriCare maternal-health API."""

__version__ = "0.1.0"
