# Calcolatore delle metriche di sicurezza acustica
"""
Pipeline completa: parametri del trasduttore → metriche di sicurezza.

    Temporizzazione → Pressione → Focalizzazione → Intensità → Potenza → TIC / MI

Il calcolo è una funzione pura: stessi parametri, stesso risultato.
Nessun campo di SafetyMetrics dipende da calcoli precedenti.

Questo modulo collega:
    - pulse: Durata impulso e duty cycle
    - focusing: Guadagno focale e riduzione d'area per asse
    - intensity: Intensità alla superficie e al fuoco, potenza irradiata
    - thermal: Diametro equivalente e TIC
    - mechanical: Indice meccanico
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from ...core.units import Q_
from .errors import InvalidInputError
from .parameters import TransducerParameters, valida_parametri
from .pulse import calcola_temporizzazione
from .focusing import analizza_focalizzazione, guadagno_totale, fattore_area_totale
from .intensity import (
    calcola_intensita_picco,
    calcola_intensita_media,
    calcola_potenza_irradiata,
)
from .thermal import calcola_area_fascio, calcola_diametro_equivalente, calcola_tic
from .mechanical import calcola_indice_meccanico


@dataclass(frozen=True)
class SafetyMetrics:
    """
    Metriche di sicurezza derivate da un set di parametri.

    Attributi:
        durata_impulso: Durata dell'impulso (s)
        duty_cycle: Duty cycle come frazione (0-1)
        pressione_superficie: Pressione alla faccia del trasduttore (kPa)
        pressione_focale: Pressione al punto di interesse (kPa)
        guadagno_focale: Guadagno totale in pressione (adimensionale)
        intensita_superficie: Intensità media sull'impulso alla superficie (W/cm²)
        intensita_media_superficie: Intensità media temporale alla superficie (mW/cm²)
        intensita_picco: ISPPA al punto di interesse (W/cm²)
        intensita_media: ISPTA al punto di interesse (mW/cm²)
        area_trasduttore: Area della faccia del trasduttore (cm²)
        area_fascio: Area del fascio al cranio (cm²)
        diametro_equivalente: Diametro equivalente del fascio al cranio (cm)
        potenza_trasduttore: Potenza irradiata (mW)
        tic: Indice termico cranico (°C)
        indice_meccanico: Indice meccanico MI
    """

    durata_impulso: "Q_"
    duty_cycle: float
    pressione_superficie: "Q_"
    pressione_focale: "Q_"
    guadagno_focale: float
    intensita_superficie: "Q_"
    intensita_media_superficie: "Q_"
    intensita_picco: "Q_"
    intensita_media: "Q_"
    area_trasduttore: "Q_"
    area_fascio: "Q_"
    diametro_equivalente: "Q_"
    potenza_trasduttore: "Q_"
    tic: float
    indice_meccanico: float

    @property
    def duty_cycle_percentuale(self) -> float:
        """Duty cycle in percentuale."""
        return self.duty_cycle * 100

    @property
    def pressione_focale_mpa(self) -> float:
        """Pressione al punto di interesse in MPa."""
        return self.pressione_focale.to("MPa").magnitude

    def to_dict(self) -> Dict[str, Any]:
        """Serializza le metriche in dizionario (unità fisse nel nome)."""
        return {
            "durata_impulso_s": self.durata_impulso.to("s").magnitude,
            "duty_cycle": self.duty_cycle,
            "duty_cycle_percentuale": self.duty_cycle_percentuale,
            "pressione_superficie_kpa": self.pressione_superficie.to("kPa").magnitude,
            "pressione_focale_kpa": self.pressione_focale.to("kPa").magnitude,
            "pressione_focale_mpa": self.pressione_focale_mpa,
            "guadagno_focale": self.guadagno_focale,
            "intensita_superficie_w_cm2": self.intensita_superficie.to("W/cm^2").magnitude,
            "intensita_media_superficie_mw_cm2": self.intensita_media_superficie.to("mW/cm^2").magnitude,
            "intensita_picco_w_cm2": self.intensita_picco.to("W/cm^2").magnitude,
            "intensita_media_mw_cm2": self.intensita_media.to("mW/cm^2").magnitude,
            "area_trasduttore_cm2": self.area_trasduttore.to("cm^2").magnitude,
            "area_fascio_cm2": self.area_fascio.to("cm^2").magnitude,
            "diametro_equivalente_cm": self.diametro_equivalente.to("cm").magnitude,
            "potenza_trasduttore_mw": self.potenza_trasduttore.to("mW").magnitude,
            "tic": self.tic,
            "indice_meccanico": self.indice_meccanico,
        }


def _campo_apertura(params: TransducerParameters) -> str:
    """Dimensione del trasduttore più lontana dall'unità, in scala logaritmica."""
    if abs(math.log10(params.larghezza_cm)) >= abs(math.log10(params.altezza_cm)):
        return "larghezza_cm"
    return "altezza_cm"


def _verifica_finito(
    params: TransducerParameters,
    campo: str,
    grandezza: str,
    valore: float,
    positivo: bool = False,
) -> None:
    """
    Verifica che una grandezza derivata sia rappresentabile.

    Ingressi finiti ma estremi possono produrre overflow (inf) o
    underflow (0, poi 0/0); l'errore è attribuito al campo che li causa.

    Solleva:
        InvalidInputError se il valore non è finito (o non è positivo)
    """
    if not math.isfinite(valore) or (positivo and valore <= 0):
        raise InvalidInputError(
            campo,
            getattr(params, campo),
            f"valore estremo: {grandezza} non rappresentabile ({valore})",
        )


def calcola_metriche_sicurezza(params: TransducerParameters) -> SafetyMetrics:
    """
    Calcola tutte le metriche di sicurezza per un set di parametri.

    Parametri:
        params: Parametri del trasduttore

    Ritorna:
        SafetyMetrics con tutte le grandezze derivate

    Solleva:
        InvalidInputError: parametro non valido, duty cycle > 1 o grandezza
            derivata non finita (ingressi estremi)
        UnsupportedFocusGeometryError: profondità focale <= spessore cranio
    """
    valida_parametri(params)

    frequenza = Q_(params.frequenza_mhz, "MHz")
    _verifica_finito(params, "frequenza_mhz", "frequenza", frequenza.to("Hz").magnitude)
    larghezza = Q_(params.larghezza_cm, "cm")
    altezza = Q_(params.altezza_cm, "cm")

    # 1. Temporizzazione impulso
    durata, dc = calcola_temporizzazione(
        int(params.cicli), params.frequenza_mhz, params.frequenza_ripetizione_khz
    )

    # 2. Focalizzazione (prima di ogni calcolo di intensità: nessun risultato parziale)
    assi = analizza_focalizzazione(
        larghezza,
        altezza,
        frequenza,
        profondita_elevazionale=(
            Q_(params.profondita_focale_elevazionale_cm, "cm")
            if params.focalizzazione_elevazionale
            else None
        ),
        profondita_azimutale=(
            Q_(params.profondita_focale_azimutale_cm, "cm")
            if params.focalizzazione_azimutale
            else None
        ),
    )
    guadagno = guadagno_totale(assi)
    _verifica_finito(params, _campo_apertura(params), "guadagno focale", guadagno)

    # 3. Pressioni alla superficie e al fuoco
    pressione_superficie = Q_(float(params.pressione_kpa), "kPa")
    if assi:
        pressione_focale = Q_(params.pressione_kpa * guadagno, "kPa")
    else:
        pressione_focale = pressione_superficie
    _verifica_finito(params, "pressione_kpa", "pressione al fuoco", pressione_focale.to("kPa").magnitude)

    # 4. Intensità
    i_superficie = calcola_intensita_picco(pressione_superficie)
    i_picco = calcola_intensita_picco(pressione_focale)
    i_media_superficie = calcola_intensita_media(i_superficie, dc)
    i_media = calcola_intensita_media(i_picco, dc)
    _verifica_finito(params, "pressione_kpa", "ISPPA", i_picco.to("W/cm^2").magnitude)
    _verifica_finito(params, "pressione_kpa", "ISPTA", i_media.to("mW/cm^2").magnitude)

    # 5. Potenza irradiata
    area = Q_(params.area_cm2, "cm^2")
    _verifica_finito(params, _campo_apertura(params), "area del trasduttore", area.magnitude, positivo=True)
    potenza = calcola_potenza_irradiata(i_media_superficie, area)
    _verifica_finito(params, "pressione_kpa", "potenza irradiata", potenza.to("mW").magnitude)

    # 6. TIC sul fascio ridotto al cranio
    area_fascio = calcola_area_fascio(area, fattore_area_totale(assi))
    d_eq = calcola_diametro_equivalente(area_fascio)
    _verifica_finito(
        params, _campo_apertura(params), "diametro equivalente", d_eq.to("cm").magnitude, positivo=True
    )
    tic = calcola_tic(potenza, d_eq)
    _verifica_finito(params, _campo_apertura(params), "TIC", tic)

    # 7. Indice meccanico sulla pressione al fuoco
    mi = calcola_indice_meccanico(pressione_focale, frequenza)
    _verifica_finito(params, "frequenza_mhz", "MI", mi)

    return SafetyMetrics(
        durata_impulso=durata,
        duty_cycle=dc,
        pressione_superficie=pressione_superficie,
        pressione_focale=pressione_focale,
        guadagno_focale=guadagno,
        intensita_superficie=i_superficie,
        intensita_media_superficie=i_media_superficie,
        intensita_picco=i_picco,
        intensita_media=i_media,
        area_trasduttore=area,
        area_fascio=area_fascio,
        diametro_equivalente=d_eq,
        potenza_trasduttore=potenza,
        tic=tic,
        indice_meccanico=mi,
    )
