# Valutazione completa di sicurezza
"""
Valutazione di un set di parametri in forma di risultato esplicito.

valuta_sicurezza non solleva eccezioni di calcolo: ritorna metriche e
verdetto, oppure l'errore che ne ha impedito il calcolo. È l'interfaccia
usata dalla dashboard, che deve mostrare l'errore invece di un risultato.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.units import formatta_grandezza
from ...core.constants import SafetyLimits
from .errors import ComputationError
from .parameters import TransducerParameters
from .calculator import SafetyMetrics, calcola_metriche_sicurezza
from .classification import SafetyVerdict, classifica_metriche


@dataclass(frozen=True)
class SafetyAssessment:
    """
    Risultato della valutazione: metriche + verdetto, oppure errore.

    Attributi:
        parametri: Parametri valutati
        metriche: Metriche calcolate (None in caso di errore)
        verdetto: Esito dei controlli (None in caso di errore)
        errore: Errore di calcolo (None se il calcolo è riuscito)
    """

    parametri: TransducerParameters
    metriche: Optional[SafetyMetrics] = None
    verdetto: Optional[SafetyVerdict] = None
    errore: Optional[ComputationError] = None

    @property
    def ok(self) -> bool:
        return self.errore is None

    def to_dict(self) -> Dict[str, Any]:
        """Serializza la valutazione (compatibile JSON)."""
        return {
            "ok": self.ok,
            "parametri": self.parametri.to_dict(),
            "metriche": self.metriche.to_dict() if self.metriche else None,
            "verdetto": self.verdetto.to_dict() if self.verdetto else None,
            "errore": self.errore.to_dict() if self.errore else None,
        }


def valuta_sicurezza(params: TransducerParameters) -> SafetyAssessment:
    """
    Calcola e classifica le metriche, catturando gli errori di calcolo.

    Parametri:
        params: Parametri del trasduttore

    Ritorna:
        SafetyAssessment con metriche e verdetto, oppure con l'errore
    """
    try:
        metriche = calcola_metriche_sicurezza(params)
    except ComputationError as e:
        return SafetyAssessment(parametri=params, errore=e)

    return SafetyAssessment(
        parametri=params,
        metriche=metriche,
        verdetto=classifica_metriche(metriche),
    )


def _esito(ok: bool) -> str:
    return "OK" if ok else "SUPERATO"


def _minuti(minuti: float) -> str:
    return "illimitato" if math.isinf(minuti) else f"{minuti:g} min"


def report_sicurezza(valutazione: SafetyAssessment) -> str:
    """
    Genera un report testuale della valutazione.

    Parametri:
        valutazione: Risultato di valuta_sicurezza

    Ritorna:
        Stringa con il report formattato
    """
    p = valutazione.parametri
    lines = [
        "=" * 60,
        "REPORT SICUREZZA ULTRASUONO TRANSCRANICO",
        "=" * 60,
        "",
        "PARAMETRI:",
        f"  PRF:              {p.frequenza_ripetizione_khz} kHz",
        f"  Frequenza:        {p.frequenza_mhz} MHz",
        f"  Cicli:            {p.cicli}",
        f"  Trasduttore:      {p.larghezza_cm} x {p.altezza_cm} cm",
        f"  Pressione:        {p.pressione_kpa} kPa",
        f"  Fuoco elevaz.:    {f'{p.profondita_focale_elevazionale_cm} cm' if p.focalizzazione_elevazionale else 'No'}",
        f"  Fuoco azimut.:    {f'{p.profondita_focale_azimutale_cm} cm' if p.focalizzazione_azimutale else 'No'}",
        "",
    ]

    if not valutazione.ok:
        lines.extend([
            "ERRORE:",
            f"  [{valutazione.errore.codice}] {valutazione.errore}",
            "",
            "=" * 60,
        ])
        return "\n".join(lines)

    m = valutazione.metriche
    v = valutazione.verdetto
    lines.extend([
        "METRICHE:",
        f"  Durata impulso:   {formatta_grandezza(m.durata_impulso, 'us')}",
        f"  Duty cycle:       {m.duty_cycle_percentuale:.3f} %",
        f"  Pressione fuoco:  {formatta_grandezza(m.pressione_focale, 'MPa')}",
        f"  Potenza:          {formatta_grandezza(m.potenza_trasduttore, 'mW', cifre=2)}",
        "",
        "CONTROLLI:",
        f"  MI:               {m.indice_meccanico:.2f} "
        f"(limite {SafetyLimits.INDICE_MECCANICO_MAX}) {_esito(v.mi_ok)}",
        f"  ISPPA:            {formatta_grandezza(m.intensita_picco, 'W/cm^2', cifre=2)} "
        f"(limite {SafetyLimits.ISPPA_MAX.magnitude:g} W/cm²) {_esito(v.isppa_ok)}",
        f"  ISPTA:            {formatta_grandezza(m.intensita_media, 'mW/cm^2', cifre=2)} "
        f"(limite {SafetyLimits.ISPTA_MAX.magnitude:g} mW/cm²) {_esito(v.ispta_ok)}",
        f"  TIC:              {m.tic:.2f} °C "
        f"(BMUS {SafetyLimits.TIC_MAX_BMUS:g} °C {_esito(v.tic_bmus_ok)}, "
        f"ITRUSST {SafetyLimits.TIC_MAX_ITRUSST:g} °C {_esito(v.tic_itrusst_ok)})",
        "",
        "ESPOSIZIONE MASSIMA:",
        f"  BMUS:             {_minuti(v.esposizione_bmus_min)}",
        f"  ITRUSST:          {_minuti(v.esposizione_itrusst_min)}",
        "",
        f"ESITO: {'CONFORME' if v.conforme else 'NON CONFORME'}",
        "=" * 60,
    ])

    return "\n".join(lines)
