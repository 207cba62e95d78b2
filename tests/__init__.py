# Test suite per il calcolatore di sicurezza tFUS
"""
Suite di test per il calcolatore di sicurezza tFUS.

Struttura:
    - unit/: Test unitari per singoli moduli del safety engine e della dashboard
"""
