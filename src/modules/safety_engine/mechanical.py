# Indice meccanico
"""
Indice meccanico (MI), indicatore del rischio di cavitazione inerziale.

    MI = p_r [MPa] / sqrt(f [MHz])

La pressione usata è quella al fuoco (dopo il guadagno di focalizzazione).

Riferimenti:
    - Apfel & Holland (1991) - Gauging the likelihood of cavitation
    - FDA (2019) - limite MI 1.9
"""

import numpy as np

from ...core.units import Q_


def calcola_indice_meccanico(pressione: "Q_", frequenza: "Q_") -> float:
    """
    Calcola l'indice meccanico.

    Parametri:
        pressione: Pressione di picco rarefattiva al fuoco
        frequenza: Frequenza fondamentale

    Ritorna:
        MI (adimensionale)
    """
    p = pressione.to("MPa").magnitude
    f = frequenza.to("MHz").magnitude
    return float(p / np.sqrt(f))
