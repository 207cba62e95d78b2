# Modulo Safety Engine - Metriche di sicurezza dell'ultrasuono transcranico
"""
Calcolo delle metriche di sicurezza per l'ultrasuono focalizzato transcranico.

Questo modulo implementa:
    - Temporizzazione impulso e duty cycle
    - Guadagno di focalizzazione per asse (numero di Fresnel)
    - Intensità ISPPA / ISPTA e potenza irradiata
    - Indice termico cranico (TIC) e tempi massimi di esposizione
    - Indice meccanico (MI)
    - Classificazione rispetto ai limiti FDA / BMUS / ITRUSST

Equazioni principali:
    - τ = N / f,  DC = τ · PRF
    - G = sqrt(D² / (λ·F))
    - I = p² / (2·Z)
    - TIC = W / (C · D_eq)
    - MI = p[MPa] / sqrt(f[MHz])

Moduli:
    - parameters: Parametri di ingresso e validazione
    - errors: Errori di calcolo
    - pulse: Temporizzazione impulso
    - focusing: Focalizzazione
    - intensity: Intensità e potenza
    - thermal: TIC e tabelle di esposizione
    - mechanical: Indice meccanico
    - calculator: Pipeline completa
    - classification: Confronto con i limiti
    - assessment: Valutazione completa e report
"""

# Parametri ed errori
from .parameters import TransducerParameters, valida_parametri
from .errors import (
    ComputationError,
    InvalidInputError,
    UnsupportedFocusGeometryError,
)

# Temporizzazione
from .pulse import (
    calcola_durata_impulso,
    calcola_duty_cycle,
    calcola_temporizzazione,
)

# Focalizzazione
from .focusing import (
    AxisFocusing,
    calcola_lunghezza_onda,
    calcola_numero_fresnel,
    calcola_guadagno_focale,
    calcola_fattore_area,
    verifica_geometria_focale,
    analizza_focalizzazione,
)

# Intensità
from .intensity import (
    calcola_intensita_picco,
    calcola_intensita_media,
    calcola_potenza_irradiata,
)

# Termico
from .thermal import (
    calcola_area_fascio,
    calcola_diametro_equivalente,
    calcola_tic,
    cerca_tempo_esposizione,
    tempo_esposizione_massimo_bmus,
    tempo_esposizione_massimo_itrusst,
    TABELLA_ESPOSIZIONE_BMUS,
    TABELLA_ESPOSIZIONE_ITRUSST,
)

# Meccanico
from .mechanical import calcola_indice_meccanico

# Pipeline
from .calculator import SafetyMetrics, calcola_metriche_sicurezza
from .classification import SafetyVerdict, classifica_metriche
from .assessment import SafetyAssessment, valuta_sicurezza, report_sicurezza

__all__ = [
    # Parametri ed errori
    "TransducerParameters",
    "valida_parametri",
    "ComputationError",
    "InvalidInputError",
    "UnsupportedFocusGeometryError",
    # Temporizzazione
    "calcola_durata_impulso",
    "calcola_duty_cycle",
    "calcola_temporizzazione",
    # Focalizzazione
    "AxisFocusing",
    "calcola_lunghezza_onda",
    "calcola_numero_fresnel",
    "calcola_guadagno_focale",
    "calcola_fattore_area",
    "verifica_geometria_focale",
    "analizza_focalizzazione",
    # Intensità
    "calcola_intensita_picco",
    "calcola_intensita_media",
    "calcola_potenza_irradiata",
    # Termico
    "calcola_area_fascio",
    "calcola_diametro_equivalente",
    "calcola_tic",
    "cerca_tempo_esposizione",
    "tempo_esposizione_massimo_bmus",
    "tempo_esposizione_massimo_itrusst",
    "TABELLA_ESPOSIZIONE_BMUS",
    "TABELLA_ESPOSIZIONE_ITRUSST",
    # Meccanico
    "calcola_indice_meccanico",
    # Pipeline
    "SafetyMetrics",
    "calcola_metriche_sicurezza",
    "SafetyVerdict",
    "classifica_metriche",
    "SafetyAssessment",
    "valuta_sicurezza",
    "report_sicurezza",
]
