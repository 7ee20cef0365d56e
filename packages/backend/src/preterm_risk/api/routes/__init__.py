"""Route modules for the API."""

from preterm_risk.api.routes import assessment, form, health

__all__ = ["assessment", "form", "health"]
