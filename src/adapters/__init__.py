"""Adaptadores: implementaciones concretas de los contratos del Core.

Cada fuente implementa `core.interfaces.randomness.RandomSource`; los
exportadores serializan modelos del dominio.
"""
