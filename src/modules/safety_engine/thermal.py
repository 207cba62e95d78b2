# Indice termico cranico
"""
Modulo per l'indice termico cranico (TIC) e i tempi massimi di esposizione.

Il TIC stima l'innalzamento di temperatura (°C) dell'osso cranico
superficiale, riscaldato dal fascio che lo attraversa.

Equazioni principali:
    - Area del fascio al cranio: A_b = A · Π k_asse
    - Diametro equivalente: D_eq = 2·sqrt(A_b / π)
    - TIC = W / (C · D_eq), con C = 40 mW/cm

Le tabelle BMUS e ITRUSST associano al TIC un tempo massimo di
esposizione: sono funzioni a gradini, scandite in ordine crescente
con soglie inclusive.

Riferimenti:
    - IEC 60601-2-37 - Thermal index definitions
    - BMUS (2010) - Safety guidelines, Table 2
    - Aubry et al. (2025) - ITRUSST consensus on biophysical safety
"""

import math
from typing import List, Optional, Tuple
import numpy as np

from ...core.units import Q_
from ...core.constants import ThermalIndexParameters


# Tabelle (soglia TIC inclusiva, minuti); oltre l'ultima soglia: 0 minuti
TABELLA_ESPOSIZIONE_BMUS: List[Tuple[float, float]] = [
    (0.7, math.inf),
    (1.0, 60.0),
    (1.5, 30.0),
    (2.0, 15.0),
    (2.5, 4.0),
    (3.0, 1.0),
]

TABELLA_ESPOSIZIONE_ITRUSST: List[Tuple[float, float]] = [
    (1.5, math.inf),
    (2.0, 80.0),
    (2.5, 40.0),
    (3.0, 10.0),
    (4.0, 2.67),
    (4.5, 0.67),
    (5.0, 0.17),
]


def calcola_area_fascio(area_trasduttore: "Q_", fattore_area: float = 1.0) -> "Q_":
    """
    Calcola l'area del fascio all'altezza del cranio.

    Parametri:
        area_trasduttore: Area della faccia del trasduttore (cm²)
        fattore_area: Prodotto dei fattori di riduzione degli assi focalizzati

    Ritorna:
        Area del fascio (cm²)
    """
    return Q_(area_trasduttore.to("cm^2").magnitude * fattore_area, "cm^2")


def calcola_diametro_equivalente(area_fascio: "Q_") -> "Q_":
    """
    Diametro del cerchio di area pari a quella del fascio.

    D_eq = 2·sqrt(A / π)
    """
    a = area_fascio.to("cm^2").magnitude
    return Q_(2 * np.sqrt(a / np.pi), "cm")


def calcola_tic(
    potenza: "Q_",
    diametro_equivalente: "Q_",
    costante: Optional["Q_"] = None,
) -> float:
    """
    Calcola l'indice termico cranico.

    TIC = W / (C · D_eq)

    Parametri:
        potenza: Potenza irradiata (mW)
        diametro_equivalente: Diametro equivalente del fascio al cranio (cm)
        costante: Costante C (default: 40 mW/cm)

    Ritorna:
        TIC (adimensionale, interpretato come °C)
    """
    if costante is None:
        costante = ThermalIndexParameters.COSTANTE_C

    w = potenza.to("mW").magnitude
    d = diametro_equivalente.to("cm").magnitude
    c = costante.to("mW/cm").magnitude

    return float(w / (c * d))


def cerca_tempo_esposizione(tic: float, tabella: List[Tuple[float, float]]) -> float:
    """
    Cerca il tempo massimo di esposizione in una tabella a gradini.

    Parametri:
        tic: Indice termico cranico
        tabella: Lista ordinata di (soglia inclusiva, minuti)

    Ritorna:
        Minuti di esposizione consentiti (math.inf = illimitato, 0 oltre l'ultima soglia)
    """
    for soglia, minuti in tabella:
        if tic <= soglia:
            return minuti
    return 0.0


def tempo_esposizione_massimo_bmus(tic: float) -> float:
    """Tempo massimo di esposizione secondo BMUS (minuti)."""
    return cerca_tempo_esposizione(tic, TABELLA_ESPOSIZIONE_BMUS)


def tempo_esposizione_massimo_itrusst(tic: float) -> float:
    """Tempo massimo di esposizione secondo ITRUSST (minuti)."""
    return cerca_tempo_esposizione(tic, TABELLA_ESPOSIZIONE_ITRUSST)
