"""Servicios del pipeline: construcción de requests y desenvoltura de respuestas."""
