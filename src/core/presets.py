# Configurazioni predefinite dei trasduttori
"""
Configurazioni predefinite dei trasduttori per il calcolatore.

Permette di richiamare set di parametri tipici per nome, invece di
reinserire ogni valore nel form.

Uso tipico:
    from src.core.presets import TransducerPresets

    presets = TransducerPresets()
    params = presets.get_preset("piano_2mhz")
"""

from dataclasses import replace
from typing import Dict, Optional

from ..modules.safety_engine.parameters import TransducerParameters


class TransducerPresets:
    """
    Database delle configurazioni predefinite.

    I preset sono valori immutabili; registra_preset aggiunge o sostituisce
    una voce solo in questa istanza.
    """

    def __init__(self, extra: Optional[Dict[str, TransducerParameters]] = None):
        """
        Inizializza il database dei preset.

        Parametri:
            extra: Preset aggiuntivi da registrare (opzionale)
        """
        self._presets: Dict[str, TransducerParameters] = {}
        self._load_defaults()
        for nome, params in (extra or {}).items():
            self.registra_preset(nome, params)

    def _load_defaults(self):
        """Carica le configurazioni di default."""
        # Sonda piana di riferimento: valori iniziali del form
        base = TransducerParameters()
        self._presets["piano_2mhz"] = base

        self._presets["focalizzato_elevazione_3cm"] = replace(
            base,
            focalizzazione_elevazionale=True,
            profondita_focale_elevazionale_cm=3.0,
        )

        self._presets["focalizzato_2d_3cm"] = replace(
            base,
            focalizzazione_elevazionale=True,
            profondita_focale_elevazionale_cm=3.0,
            focalizzazione_azimutale=True,
            profondita_focale_azimutale_cm=3.0,
        )

        # Neuromodulazione a bassa frequenza, impulsi lunghi
        self._presets["neuromodulazione_500khz"] = TransducerParameters(
            frequenza_ripetizione_khz=1.0,
            frequenza_mhz=0.5,
            cicli=100,
            larghezza_cm=2.0,
            altezza_cm=2.0,
            pressione_kpa=200.0,
        )

    def registra_preset(self, nome: str, params: TransducerParameters):
        """Registra un preset con il nome indicato."""
        self._presets[nome] = params

    def get_preset(self, nome: str) -> TransducerParameters:
        """
        Ottiene un preset per nome.

        Parametri:
            nome: Nome del preset (es. "piano_2mhz")

        Ritorna:
            TransducerParameters del preset

        Solleva:
            KeyError se il preset non è trovato
        """
        if nome not in self._presets:
            disponibili = list(self._presets.keys())
            raise KeyError(f"Preset '{nome}' non trovato. Disponibili: {disponibili}")
        return self._presets[nome]

    def list_presets(self) -> list[str]:
        """Ritorna la lista dei preset disponibili."""
        return list(self._presets.keys())
