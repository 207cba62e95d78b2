# Costanti fisiche e limiti regolatori
"""
Costanti fisiche e limiti di sicurezza per l'ultrasuono transcranico.

Contiene:
    - TissueProperties: Proprietà acustiche del tessuto (c, ρ, Z)
    - ThermalIndexParameters: Parametri per l'indice termico cranico (TIC)
    - SafetyLimits: Limiti FDA / BMUS / ITRUSST
    - ConversionFactors: Fattori di conversione tra unità di ingresso

Le proprietà del tessuto seguono la revisione più completa del modello:
c = 1540 m/s e ρ = 1058 kg/m³, da cui Z = ρ·c ≈ 1.63 MRayl.

Riferimenti:
    - FDA (2019) - Marketing Clearance of Diagnostic Ultrasound Systems
    - BMUS (2010) - Guidelines for the safe use of diagnostic ultrasound
    - ITRUSST (2024) - Consensus on biophysical safety for transcranial ultrasound
"""

from .units import Q_


def calcola_impedenza_acustica(densita: "Q_", velocita_suono: "Q_") -> "Q_":
    """
    Calcola l'impedenza acustica caratteristica Z = ρ × c.

    Parametri:
        densita: Densità del mezzo (kg/m³)
        velocita_suono: Velocità del suono nel mezzo (m/s)

    Ritorna:
        Impedenza acustica (kg/(m²·s) = rayl)
    """
    rho = densita.to("kg/m^3").magnitude
    c = velocita_suono.to("m/s").magnitude
    return Q_(rho * c, "kg/(m^2*s)")


class TissueProperties:
    """Proprietà acustiche del tessuto cerebrale/molle."""

    VELOCITA_SUONO = Q_(1540, "m/s")
    DENSITA = Q_(1058, "kg/m^3")
    IMPEDENZA = calcola_impedenza_acustica(DENSITA, VELOCITA_SUONO)

    # Spessore di scalpo + cranio attraversato prima del bersaglio
    PROFONDITA_CRANIO = Q_(1, "cm")


class ThermalIndexParameters:
    """
    Parametri del modello TIC (indice termico cranico).

    TIC = W / (C · D_eq), con C costante di riscaldamento osseo.
    """

    COSTANTE_C = Q_(40, "mW/cm")


class SafetyLimits:
    """
    Limiti regolatori per le metriche di sicurezza.

    I controlli sono stretti: un valore pari al limite non è conforme.
    """

    # FDA Track 3
    INDICE_MECCANICO_MAX = 1.9
    ISPPA_MAX = Q_(190, "W/cm^2")
    ISPTA_MAX = Q_(720, "mW/cm^2")

    # Innalzamento termico massimo (interpretazione °C del TIC)
    TIC_MAX_BMUS = 3.0
    TIC_MAX_ITRUSST = 6.0


class ConversionFactors:
    """Fattori di conversione per le unità dei parametri di ingresso."""

    MHZ_TO_HZ = 1e6
    KHZ_TO_HZ = 1e3
    KPA_TO_PA = 1e3
    PA_TO_MPA = 1e-6
    CM_TO_M = 1e-2
    W_M2_TO_W_CM2 = 1e-4
    W_TO_MW = 1e3
