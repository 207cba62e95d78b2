# Errori del calcolatore di sicurezza
"""
Tassonomia degli errori di calcolo.

    - ComputationError: Base comune (sottoclasse di ValueError)
    - InvalidInputError: Parametro non finito, non positivo o di tipo errato
    - UnsupportedFocusGeometryError: Profondità focale non superiore allo
      spessore del cranio; il modello di fuoco limitato dalla diffrazione
      non è implementato in quel regime

Entrambi gli errori sono riportati al chiamante come valori espliciti
(vedi valuta_sicurezza), mai come NaN/Inf mostrati come risultato "sicuro".
"""

from typing import Optional


class ComputationError(ValueError):
    """Errore generico nel calcolo delle metriche di sicurezza."""

    codice = "errore_calcolo"

    def to_dict(self) -> dict:
        """Serializza l'errore per l'interfaccia."""
        return {"codice": self.codice, "messaggio": str(self)}


class InvalidInputError(ComputationError):
    """
    Parametro di ingresso non valido.

    Attributi:
        campo: Nome del parametro che ha causato l'errore
        valore: Valore ricevuto
    """

    codice = "input_non_valido"

    def __init__(self, campo: str, valore, messaggio: str):
        super().__init__(f"{campo}: {messaggio} (ricevuto {valore!r})")
        self.campo = campo
        self.valore = valore

    def to_dict(self) -> dict:
        dati = super().to_dict()
        dati["campo"] = self.campo
        return dati


class UnsupportedFocusGeometryError(ComputationError):
    """
    Profondità focale troppo ridotta rispetto allo spessore del cranio.

    Attributi:
        asse: "elevazionale" o "azimutale" (None se non specificato)
        profondita_focale_cm: Profondità focale richiesta (cm)
        profondita_cranio_cm: Spessore cranio + scalpo (cm)
    """

    codice = "geometria_focale_non_supportata"

    def __init__(
        self,
        asse: Optional[str],
        profondita_focale_cm: float,
        profondita_cranio_cm: float,
        messaggio: Optional[str] = None,
    ):
        if messaggio is None:
            nome = f"Profondità focale {asse}" if asse else "Profondità focale"
            messaggio = (
                f"{nome} troppo ridotta: {profondita_focale_cm} cm "
                f"deve superare lo spessore del cranio ({profondita_cranio_cm} cm). "
                "Il fuoco limitato dalla diffrazione non è implementato."
            )
        super().__init__(messaggio)
        self.asse = asse
        self.profondita_focale_cm = profondita_focale_cm
        self.profondita_cranio_cm = profondita_cranio_cm

    def to_dict(self) -> dict:
        dati = super().to_dict()
        dati["asse"] = self.asse
        dati["profondita_focale_cm"] = self.profondita_focale_cm
        return dati
