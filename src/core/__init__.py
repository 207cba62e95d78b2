# Modulo core - Unità di misura, costanti fisiche, limiti regolatori
"""
Modulo core del calcolatore di sicurezza tFUS.

Contiene:
    - units: Sistema di unità di misura basato su Pint
    - constants: Proprietà del tessuto e limiti FDA / BMUS / ITRUSST
    - presets: Configurazioni predefinite dei trasduttori
      (importare da src.core.presets: dipende dal safety engine)
"""

from .units import ureg, Q_, verifica_dimensioni, formatta_grandezza
from .constants import (
    TissueProperties,
    ThermalIndexParameters,
    SafetyLimits,
    ConversionFactors,
    calcola_impedenza_acustica,
)

__all__ = [
    "ureg",
    "Q_",
    "verifica_dimensioni",
    "formatta_grandezza",
    "TissueProperties",
    "ThermalIndexParameters",
    "SafetyLimits",
    "ConversionFactors",
    "calcola_impedenza_acustica",
]
