# Guadagno di focalizzazione
"""
Modulo per il guadagno di pressione dovuto alla focalizzazione.

La focalizzazione è applicata indipendentemente sui due assi del
trasduttore rettangolare:
    - elevazionale: apertura = altezza del trasduttore
    - azimutale: apertura = larghezza del trasduttore

Equazioni principali:
    - Lunghezza d'onda: λ = c / f
    - Numero di Fresnel: N_F = D² / (λ · F)
    - Guadagno in pressione: G = sqrt(N_F)
    - Riduzione area al cranio: k = 1 - d_cranio / F

Il modello vale solo per F > d_cranio: per fuochi più superficiali il
fascio al cranio sarebbe limitato dalla diffrazione, caso non implementato.

Riferimenti:
    - Kino (1987) - Acoustic Waves: Devices, Imaging and Analog Signal Processing
    - Szabo (2014) - Diagnostic Ultrasound Imaging, cap. 6
"""

from dataclasses import dataclass
from typing import Dict, Optional
import numpy as np

from ...core.units import Q_
from ...core.constants import TissueProperties, ConversionFactors
from .errors import UnsupportedFocusGeometryError


@dataclass
class AxisFocusing:
    """
    Focalizzazione lungo un asse.

    Attributi:
        asse: "elevazionale" o "azimutale"
        apertura: Dimensione del trasduttore lungo l'asse (cm)
        profondita_focale: Profondità focale (cm)
        numero_fresnel: Numero di Fresnel adimensionale
        guadagno: Guadagno in pressione sqrt(N_F)
        fattore_area: Riduzione della dimensione del fascio al cranio
    """

    asse: str
    apertura: "Q_"
    profondita_focale: "Q_"
    numero_fresnel: float
    guadagno: float
    fattore_area: float


def calcola_lunghezza_onda(
    frequenza: "Q_",
    velocita_suono: "Q_" = None,
) -> "Q_":
    """
    Calcola la lunghezza d'onda nel tessuto.

    λ = c / f

    Parametri:
        frequenza: Frequenza fondamentale (MHz)
        velocita_suono: Velocità del suono (default: tessuto, 1540 m/s)

    Ritorna:
        Lunghezza d'onda (m)
    """
    if velocita_suono is None:
        velocita_suono = TissueProperties.VELOCITA_SUONO

    c = velocita_suono.to("m/s").magnitude
    f = frequenza.to("MHz").magnitude * ConversionFactors.MHZ_TO_HZ

    return Q_(c / f, "m")


def calcola_numero_fresnel(
    apertura: "Q_",
    profondita_focale: "Q_",
    lunghezza_onda: "Q_",
) -> float:
    """
    Calcola il numero di Fresnel dell'apertura.

    N_F = D² / (λ · F)

    Parametri:
        apertura: Dimensione dell'apertura lungo l'asse (cm)
        profondita_focale: Profondità focale (cm)
        lunghezza_onda: Lunghezza d'onda (m)

    Ritorna:
        Numero di Fresnel (adimensionale)
    """
    d = apertura.to("cm").magnitude * ConversionFactors.CM_TO_M
    f = profondita_focale.to("cm").magnitude * ConversionFactors.CM_TO_M
    lam = lunghezza_onda.to("m").magnitude

    # d * d satura a inf dove d**2 solleverebbe OverflowError
    return d * d / (lam * f)


def verifica_geometria_focale(
    asse: Optional[str],
    profondita_focale: "Q_",
    profondita_cranio: "Q_" = None,
) -> None:
    """
    Verifica che il fuoco sia oltre il cranio.

    Solleva:
        UnsupportedFocusGeometryError se F <= d_cranio
    """
    if profondita_cranio is None:
        profondita_cranio = TissueProperties.PROFONDITA_CRANIO

    f = profondita_focale.to("cm").magnitude
    d = profondita_cranio.to("cm").magnitude

    if f <= d:
        raise UnsupportedFocusGeometryError(asse, f, d)


def calcola_guadagno_focale(
    apertura: "Q_",
    profondita_focale: "Q_",
    frequenza: "Q_",
    asse: Optional[str] = None,
) -> float:
    """
    Calcola il guadagno in pressione al fuoco per un asse.

    G = sqrt(N_F) = D / sqrt(λ · F)

    Parametri:
        apertura: Dimensione del trasduttore lungo l'asse (cm)
        profondita_focale: Profondità focale (cm)
        frequenza: Frequenza fondamentale (MHz)
        asse: Nome dell'asse, riportato nell'errore (opzionale)

    Ritorna:
        Guadagno in pressione (adimensionale)

    Solleva:
        UnsupportedFocusGeometryError se F <= d_cranio
    """
    verifica_geometria_focale(asse, profondita_focale)

    lam = calcola_lunghezza_onda(frequenza)
    return float(np.sqrt(calcola_numero_fresnel(apertura, profondita_focale, lam)))


def calcola_fattore_area(
    profondita_focale: "Q_",
    profondita_cranio: "Q_" = None,
    asse: Optional[str] = None,
) -> float:
    """
    Fattore di riduzione della dimensione del fascio al cranio.

    Nel modello a cono geometrico il fascio converge linearmente dalla
    faccia del trasduttore (k = 1) al fuoco (k = 0):

    k = 1 - d_cranio / F

    Parametri:
        profondita_focale: Profondità focale (cm)
        profondita_cranio: Spessore scalpo + cranio (default: 1 cm)
        asse: Nome dell'asse, riportato nell'errore (opzionale)

    Ritorna:
        Fattore di riduzione (0-1)

    Solleva:
        UnsupportedFocusGeometryError se F <= d_cranio
    """
    if profondita_cranio is None:
        profondita_cranio = TissueProperties.PROFONDITA_CRANIO

    verifica_geometria_focale(asse, profondita_focale, profondita_cranio)

    return 1 - profondita_cranio.to("cm").magnitude / profondita_focale.to("cm").magnitude


def analizza_asse(
    asse: str,
    apertura: "Q_",
    profondita_focale: "Q_",
    frequenza: "Q_",
) -> AxisFocusing:
    """
    Analisi completa della focalizzazione lungo un asse.

    Solleva:
        UnsupportedFocusGeometryError se il fuoco non supera il cranio
    """
    guadagno = calcola_guadagno_focale(apertura, profondita_focale, frequenza, asse=asse)

    lam = calcola_lunghezza_onda(frequenza)

    return AxisFocusing(
        asse=asse,
        apertura=apertura,
        profondita_focale=profondita_focale,
        numero_fresnel=calcola_numero_fresnel(apertura, profondita_focale, lam),
        guadagno=guadagno,
        fattore_area=calcola_fattore_area(profondita_focale, asse=asse),
    )


def analizza_focalizzazione(
    larghezza: "Q_",
    altezza: "Q_",
    frequenza: "Q_",
    profondita_elevazionale: Optional["Q_"] = None,
    profondita_azimutale: Optional["Q_"] = None,
) -> Dict[str, AxisFocusing]:
    """
    Analizza la focalizzazione sugli assi abilitati.

    Un asse è abilitato se la sua profondità focale è fornita.
    L'ordine di applicazione è elevazionale, poi azimutale.

    Parametri:
        larghezza: Larghezza del trasduttore (apertura azimutale)
        altezza: Altezza del trasduttore (apertura elevazionale)
        frequenza: Frequenza fondamentale
        profondita_elevazionale: Profondità focale in elevazione (None = non focalizzato)
        profondita_azimutale: Profondità focale in azimut (None = non focalizzato)

    Ritorna:
        Dizionario {asse: AxisFocusing}
    """
    assi = {}
    if profondita_elevazionale is not None:
        assi["elevazionale"] = analizza_asse("elevazionale", altezza, profondita_elevazionale, frequenza)
    if profondita_azimutale is not None:
        assi["azimutale"] = analizza_asse("azimutale", larghezza, profondita_azimutale, frequenza)
    return assi


def guadagno_totale(assi: Dict[str, AxisFocusing]) -> float:
    """Prodotto dei guadagni in pressione degli assi focalizzati."""
    g = 1.0
    for focalizzazione in assi.values():
        g *= focalizzazione.guadagno
    return g


def fattore_area_totale(assi: Dict[str, AxisFocusing]) -> float:
    """Prodotto dei fattori di riduzione d'area degli assi focalizzati."""
    k = 1.0
    for focalizzazione in assi.values():
        k *= focalizzazione.fattore_area
    return k
