# Parametri del trasduttore
"""
Parametri di ingresso del calcolatore di sicurezza.

TransducerParameters è un valore immutabile: viene passato al calcolo,
trasformato e scartato. I campi sono numeri semplici con l'unità nel nome,
nello stesso formato usato dai form dell'interfaccia.

La validazione (valida_parametri) è separata dalla costruzione, così che
l'interfaccia possa costruire parametri incompleti e ricevere un errore
esplicito dal calcolo invece di un'eccezione in fase di input.
"""

import math
import numbers
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from .errors import InvalidInputError


@dataclass(frozen=True)
class TransducerParameters:
    """
    Parametri del trasduttore e dell'impulso.

    Attributi:
        frequenza_ripetizione_khz: Frequenza di ripetizione impulsi PRF (kHz)
        frequenza_mhz: Frequenza fondamentale (MHz)
        cicli: Numero di cicli per impulso
        larghezza_cm: Larghezza del trasduttore, asse azimutale (cm)
        altezza_cm: Altezza del trasduttore, asse elevazionale (cm)
        pressione_kpa: Pressione alla superficie del trasduttore (kPa)
        focalizzazione_elevazionale: Abilita il guadagno focale in elevazione
        profondita_focale_elevazionale_cm: Profondità focale in elevazione (cm)
        focalizzazione_azimutale: Abilita il guadagno focale in azimut
        profondita_focale_azimutale_cm: Profondità focale in azimut (cm)
    """

    frequenza_ripetizione_khz: float = 5.0
    frequenza_mhz: float = 2.0
    cicli: int = 2
    larghezza_cm: float = 2.87
    altezza_cm: float = 1.33
    pressione_kpa: float = 600.0
    focalizzazione_elevazionale: bool = False
    profondita_focale_elevazionale_cm: float = 3.0
    focalizzazione_azimutale: bool = False
    profondita_focale_azimutale_cm: float = 3.0

    @property
    def area_cm2(self) -> float:
        """Area della faccia del trasduttore (cm²)."""
        return self.larghezza_cm * self.altezza_cm

    @property
    def assi_focalizzati(self) -> Dict[str, float]:
        """
        Assi con focalizzazione abilitata, in ordine di applicazione.

        Ritorna:
            Dizionario {asse: profondità focale (cm)}, elevazionale prima
        """
        assi = {}
        if self.focalizzazione_elevazionale:
            assi["elevazionale"] = self.profondita_focale_elevazionale_cm
        if self.focalizzazione_azimutale:
            assi["azimutale"] = self.profondita_focale_azimutale_cm
        return assi

    def to_dict(self) -> Dict[str, Any]:
        """Serializza i parametri in dizionario."""
        return asdict(self)

    @classmethod
    def from_dict(cls, dati: Dict[str, Any]) -> "TransducerParameters":
        """
        Costruisce i parametri da un dizionario (es. stato del form).

        Le chiavi mancanti assumono il valore di default.

        Solleva:
            InvalidInputError se il dizionario contiene chiavi sconosciute
        """
        nomi = {f.name for f in fields(cls)}
        sconosciute = sorted(set(dati) - nomi)
        if sconosciute:
            raise InvalidInputError(
                sconosciute[0], dati[sconosciute[0]], f"parametro non riconosciuto. Disponibili: {sorted(nomi)}"
            )
        return cls(**dati)


# Campi che devono essere strettamente positivi
_CAMPI_POSITIVI = (
    "frequenza_ripetizione_khz",
    "frequenza_mhz",
    "larghezza_cm",
    "altezza_cm",
)


def _verifica_numero(campo: str, valore) -> float:
    """Verifica che il valore sia un numero reale finito."""
    if isinstance(valore, bool) or not isinstance(valore, numbers.Real):
        raise InvalidInputError(campo, valore, "deve essere un numero")
    if not math.isfinite(valore):
        raise InvalidInputError(campo, valore, "deve essere finito")
    return float(valore)


def _verifica_positivo(campo: str, valore) -> float:
    valore = _verifica_numero(campo, valore)
    if valore <= 0:
        raise InvalidInputError(campo, valore, "deve essere positivo")
    return valore


def valida_parametri(params: TransducerParameters) -> TransducerParameters:
    """
    Verifica che i parametri siano fisicamente sensati.

    Le profondità focali sono verificate solo per gli assi abilitati;
    il confronto con lo spessore del cranio è demandato al calcolo del
    guadagno focale (UnsupportedFocusGeometryError).

    Parametri:
        params: Parametri del trasduttore

    Ritorna:
        Gli stessi parametri, se validi

    Solleva:
        InvalidInputError al primo campo non valido
    """
    for campo in _CAMPI_POSITIVI:
        _verifica_positivo(campo, getattr(params, campo))

    cicli = params.cicli
    if isinstance(cicli, float) and cicli.is_integer():
        cicli = int(cicli)
    if isinstance(cicli, bool) or not isinstance(cicli, numbers.Integral):
        raise InvalidInputError("cicli", params.cicli, "deve essere un numero intero")
    if cicli < 1:
        raise InvalidInputError("cicli", params.cicli, "deve essere almeno 1")

    pressione = _verifica_numero("pressione_kpa", params.pressione_kpa)
    if pressione < 0:
        raise InvalidInputError("pressione_kpa", pressione, "non può essere negativa")

    for nome in ("focalizzazione_elevazionale", "focalizzazione_azimutale"):
        if not isinstance(getattr(params, nome), bool):
            raise InvalidInputError(nome, getattr(params, nome), "deve essere booleano")

    for asse, profondita in params.assi_focalizzati.items():
        _verifica_positivo(f"profondita_focale_{asse}_cm", profondita)

    return params
