# Classificazione rispetto ai limiti regolatori
"""
Confronto delle metriche con i limiti FDA, BMUS e ITRUSST.

Tutti i controlli sono stretti (valore < limite): un valore esattamente
pari al limite non è conforme.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.constants import SafetyLimits
from .calculator import SafetyMetrics
from .thermal import tempo_esposizione_massimo_bmus, tempo_esposizione_massimo_itrusst


@dataclass(frozen=True)
class SafetyVerdict:
    """
    Esito dei controlli di sicurezza.

    Attributi:
        mi_ok: MI < 1.9
        isppa_ok: ISPPA < 190 W/cm²
        ispta_ok: ISPTA < 720 mW/cm²
        tic_bmus_ok: TIC < 3 °C
        tic_itrusst_ok: TIC < 6 °C
        esposizione_bmus_min: Tempo massimo di esposizione BMUS (minuti, inf = illimitato)
        esposizione_itrusst_min: Tempo massimo di esposizione ITRUSST (minuti, inf = illimitato)
    """

    mi_ok: bool
    isppa_ok: bool
    ispta_ok: bool
    tic_bmus_ok: bool
    tic_itrusst_ok: bool
    esposizione_bmus_min: float
    esposizione_itrusst_min: float

    @property
    def conforme(self) -> bool:
        """True se tutti i controlli sono superati."""
        return all((self.mi_ok, self.isppa_ok, self.ispta_ok, self.tic_bmus_ok, self.tic_itrusst_ok))

    def to_dict(self) -> Dict[str, Any]:
        """Serializza il verdetto; l'esposizione illimitata diventa None."""
        return {
            "mi_ok": self.mi_ok,
            "isppa_ok": self.isppa_ok,
            "ispta_ok": self.ispta_ok,
            "tic_bmus_ok": self.tic_bmus_ok,
            "tic_itrusst_ok": self.tic_itrusst_ok,
            "esposizione_bmus_min": _minuti_json(self.esposizione_bmus_min),
            "esposizione_itrusst_min": _minuti_json(self.esposizione_itrusst_min),
            "conforme": self.conforme,
        }


def _minuti_json(minuti: float) -> Optional[float]:
    return None if math.isinf(minuti) else minuti


def classifica_metriche(metriche: SafetyMetrics) -> SafetyVerdict:
    """
    Classifica le metriche rispetto ai limiti regolatori.

    Parametri:
        metriche: Metriche calcolate

    Ritorna:
        SafetyVerdict con l'esito di ogni controllo
    """
    isppa = metriche.intensita_picco.to("W/cm^2").magnitude
    ispta = metriche.intensita_media.to("mW/cm^2").magnitude

    return SafetyVerdict(
        mi_ok=metriche.indice_meccanico < SafetyLimits.INDICE_MECCANICO_MAX,
        isppa_ok=isppa < SafetyLimits.ISPPA_MAX.to("W/cm^2").magnitude,
        ispta_ok=ispta < SafetyLimits.ISPTA_MAX.to("mW/cm^2").magnitude,
        tic_bmus_ok=metriche.tic < SafetyLimits.TIC_MAX_BMUS,
        tic_itrusst_ok=metriche.tic < SafetyLimits.TIC_MAX_ITRUSST,
        esposizione_bmus_min=tempo_esposizione_massimo_bmus(metriche.tic),
        esposizione_itrusst_min=tempo_esposizione_massimo_itrusst(metriche.tic),
    )
