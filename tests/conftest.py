# Configurazione pytest e fixture comuni
"""
Fixture e configurazione per i test del calcolatore di sicurezza tFUS.
"""

import pytest
import sys
from pathlib import Path

# Aggiungi la radice del repository al path per gli import "src.*"
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))


@pytest.fixture
def unita():
    """Fixture per il registry delle unità Pint."""
    from src.core.units import ureg, Q_

    return ureg, Q_


@pytest.fixture
def parametri_standard():
    """
    Fixture per la sonda piana di riferimento.

    PRF = 5 kHz, f = 2 MHz, 2 cicli, 2.87 × 1.33 cm, 600 kPa, nessun fuoco
    """
    from src.modules.safety_engine import TransducerParameters

    return TransducerParameters(
        frequenza_ripetizione_khz=5,
        frequenza_mhz=2,
        cicli=2,
        larghezza_cm=2.87,
        altezza_cm=1.33,
        pressione_kpa=600,
    )


@pytest.fixture
def parametri_focalizzati(parametri_standard):
    """
    Fixture per la stessa sonda focalizzata su entrambi gli assi.

    F_elev = 3 cm, F_azim = 4 cm
    """
    from dataclasses import replace

    return replace(
        parametri_standard,
        focalizzazione_elevazionale=True,
        profondita_focale_elevazionale_cm=3.0,
        focalizzazione_azimutale=True,
        profondita_focale_azimutale_cm=4.0,
    )


@pytest.fixture
def costanti_tessuto():
    """
    Fixture con le costanti del modello come numeri semplici.

    c = 1540 m/s, ρ = 1058 kg/m³, d_cranio = 1 cm, C = 40 mW/cm
    """
    return {
        "c": 1540.0,
        "rho": 1058.0,
        "z": 1540.0 * 1058.0,
        "d_cranio_cm": 1.0,
        "c_tic": 40.0,
    }
