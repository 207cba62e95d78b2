# Intensità acustica e potenza
"""
Modulo per il calcolo delle intensità acustiche e della potenza irradiata.

Per un'onda piana progressiva l'intensità media sull'impulso dipende dal
quadrato dell'ampiezza di pressione e dall'impedenza del mezzo.

Equazioni principali:
    - Intensità media sull'impulso: I = p² / (2·Z)
    - Intensità media temporale: I_ta = I · DC
    - Potenza irradiata: W = I_ta · A

Riferimenti:
    - IEC 62127-1 - Measurement and characterization of ultrasonic fields
    - FDA (2019) - ISPPA.3 / ISPTA.3
"""

from typing import Optional

from ...core.units import Q_
from ...core.constants import TissueProperties, ConversionFactors


def calcola_intensita_picco(
    pressione: "Q_",
    impedenza: Optional["Q_"] = None,
) -> "Q_":
    """
    Calcola l'intensità media sull'impulso da un'ampiezza di pressione.

    I = p² / (2·Z)

    Parametri:
        pressione: Ampiezza di pressione (kPa o Pa)
        impedenza: Impedenza acustica (default: tessuto, ρ·c)

    Ritorna:
        Intensità (W/cm²)
    """
    if impedenza is None:
        impedenza = TissueProperties.IMPEDENZA

    p = pressione.to("kPa").magnitude * ConversionFactors.KPA_TO_PA
    z = impedenza.to("kg/(m^2*s)").magnitude

    # W/m² → W/cm²
    i = (p * p) / (2 * z) * ConversionFactors.W_M2_TO_W_CM2
    return Q_(i, "W/cm^2")


def calcola_intensita_media(intensita_picco: "Q_", duty_cycle: float) -> "Q_":
    """
    Calcola l'intensità media temporale.

    I_ta = I_pa · DC

    Parametri:
        intensita_picco: Intensità media sull'impulso (W/cm²)
        duty_cycle: Duty cycle come frazione (0-1)

    Ritorna:
        Intensità media temporale (mW/cm²)
    """
    i = intensita_picco.to("W/cm^2").magnitude
    return Q_(i * duty_cycle * ConversionFactors.W_TO_MW, "mW/cm^2")


def calcola_potenza_irradiata(intensita_media: "Q_", area: "Q_") -> "Q_":
    """
    Calcola la potenza acustica irradiata dal trasduttore.

    W = I_ta · A

    Parametri:
        intensita_media: Intensità media temporale alla superficie (mW/cm²)
        area: Area della faccia del trasduttore (cm²)

    Ritorna:
        Potenza (mW)
    """
    i = intensita_media.to("mW/cm^2").magnitude
    a = area.to("cm^2").magnitude
    return Q_(i * a, "mW")
