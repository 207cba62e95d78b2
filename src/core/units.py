# Sistema di unità di misura per il calcolatore di sicurezza tFUS
"""
Sistema di unità di misura basato su Pint.

Questo modulo fornisce un registry di unità di misura configurato per
le grandezze tipiche dell'ultrasuono transcranico (pressioni in kPa/MPa,
intensità in W/cm² e mW/cm², frequenze in MHz, tempi in μs).

Uso tipico:
    from src.core.units import ureg, Q_

    pressione = Q_(600, "kPa")
    frequenza = Q_(2, "MHz")
    intensita = Q_(190, "W/cm^2")

    pressione_mpa = pressione.to("MPa")

Riferimenti:
    - Pint documentation: https://pint.readthedocs.io/
"""

import pint

# Creare il registry delle unità
ureg = pint.UnitRegistry()

# Alias per comodità - Quantity constructor
Q_ = ureg.Quantity

# Unità comunemente usate per la sicurezza tFUS:
# - Pressione: Pa, kPa, MPa
# - Frequenza: Hz, kHz, MHz
# - Tempo: s, us (microsecondi)
# - Intensità: W/cm^2 (ISPPA), mW/cm^2 (ISPTA)
# - Potenza: mW
# - Lunghezza: m, cm, mm
# - Impedenza acustica: kg/(m^2*s) (rayl)

# Configurazione per output più leggibile
ureg.formatter.default_format = "~P"  # Formato compatto con simboli


def verifica_dimensioni(grandezza: pint.Quantity, dimensione_attesa: str) -> bool:
    """
    Verifica che una grandezza abbia le dimensioni attese.

    Parametri:
        grandezza: Grandezza fisica con unità
        dimensione_attesa: Stringa con l'unità attesa (es. "kPa", "W/cm^2")

    Ritorna:
        True se le dimensioni sono compatibili, False altrimenti

    Esempio:
        >>> intensita = Q_(190, "W/cm^2")
        >>> verifica_dimensioni(intensita, "mW/mm^2")  # True
        >>> verifica_dimensioni(intensita, "Pa")       # False
    """
    try:
        grandezza.to(dimensione_attesa)
        return True
    except pint.DimensionalityError:
        return False


def formatta_grandezza(grandezza: pint.Quantity, unita_output: str = None, cifre: int = 3) -> str:
    """
    Formatta una grandezza fisica per output leggibile.

    Parametri:
        grandezza: Grandezza fisica con unità
        unita_output: Unità desiderata per l'output (opzionale)
        cifre: Numero di cifre decimali

    Ritorna:
        Stringa formattata della grandezza

    Esempio:
        >>> formatta_grandezza(Q_(600000, "Pa"), "kPa", cifre=1)
        '600.0 kPa'
    """
    if unita_output:
        grandezza = grandezza.to(unita_output)
    return f"{grandezza:~.{cifre}fP}"
