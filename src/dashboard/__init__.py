# Modulo Dashboard
"""
Dashboard interattiva per il calcolatore di sicurezza tFUS.

Interfaccia grafica basata su Plotly Dash: raccoglie i parametri del
trasduttore, chiama il safety engine e mostra metriche e verdetti.

Funzionalità:
    - Inserimento parametri impulso e trasduttore
    - Selezione preset
    - Focalizzazione elevazionale / azimutale
    - Controlli MI, ISPPA, ISPTA, TIC con tempi massimi di esposizione

Esecuzione:
    python -m src.dashboard.app
"""

from .app import create_app, run_dashboard

__all__ = ["create_app", "run_dashboard"]
