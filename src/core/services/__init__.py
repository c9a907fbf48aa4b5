"""Servicios del Core: consumidores de capacidades (dado, nombres)."""
