# Moduli di calcolo tFUS
"""
Moduli di calcolo per il calcolatore di sicurezza tFUS.

Sottomoduli:
    - safety_engine: Metriche di sicurezza e classificazione rispetto ai limiti
"""
