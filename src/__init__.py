# tFUS Safety Calculator
# Calcolatore delle metriche di sicurezza per ultrasuono focalizzato transcranico
"""
Modulo principale del calcolatore di sicurezza tFUS.

Questo pacchetto calcola le metriche di sicurezza standard (indice
meccanico, intensità di picco e media, indice termico cranico) a partire
dai parametri del trasduttore e le confronta con i limiti FDA, BMUS e
ITRUSST.

Moduli:
    - core: Unità di misura, costanti fisiche, limiti, preset
    - modules.safety_engine: Calcolo e classificazione delle metriche
    - dashboard: Interfaccia grafica Dash
"""

__version__ = "0.1.0"
__author__ = "tFUS Safety Team"
