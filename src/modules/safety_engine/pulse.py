# Temporizzazione dell'impulso
"""
Durata dell'impulso e duty cycle.

Equazioni:
    - Durata impulso: τ = N_cicli / f
    - Duty cycle: DC = τ × PRF   (frazione adimensionale in [0, 1])

Il duty cycle è sempre trattato come frazione; la percentuale è solo
una rappresentazione per l'output.
"""

from typing import Tuple

from ...core.units import Q_
from ...core.constants import ConversionFactors
from .errors import InvalidInputError


def calcola_durata_impulso(cicli: int, frequenza_mhz: float) -> "Q_":
    """
    Calcola la durata dell'impulso.

    τ = N / f

    Parametri:
        cicli: Numero di cicli per impulso
        frequenza_mhz: Frequenza fondamentale (MHz)

    Ritorna:
        Durata dell'impulso (s)
    """
    return Q_(cicli / (frequenza_mhz * ConversionFactors.MHZ_TO_HZ), "s")


def calcola_duty_cycle(durata_impulso: "Q_", frequenza_ripetizione_khz: float) -> float:
    """
    Calcola il duty cycle come frazione del tempo di trasmissione.

    DC = τ × PRF

    Parametri:
        durata_impulso: Durata dell'impulso (s)
        frequenza_ripetizione_khz: Frequenza di ripetizione (kHz)

    Ritorna:
        Duty cycle (0-1)

    Solleva:
        InvalidInputError se gli impulsi si sovrappongono (DC > 1)
    """
    tau = durata_impulso.to("s").magnitude
    dc = tau * (frequenza_ripetizione_khz * ConversionFactors.KHZ_TO_HZ)

    if dc > 1:
        raise InvalidInputError(
            "frequenza_ripetizione_khz",
            frequenza_ripetizione_khz,
            f"duty cycle {dc:.3g} > 1: impulsi più lunghi del periodo di ripetizione",
        )

    return dc


def calcola_temporizzazione(
    cicli: int,
    frequenza_mhz: float,
    frequenza_ripetizione_khz: float,
) -> Tuple["Q_", float]:
    """
    Calcola durata impulso e duty cycle in un unico passo.

    Ritorna:
        Tuple (durata_impulso, duty_cycle)
    """
    durata = calcola_durata_impulso(cicli, frequenza_mhz)
    return durata, calcola_duty_cycle(durata, frequenza_ripetizione_khz)
