# Test unitari per la dashboard
"""
Test per i componenti della dashboard che non richiedono un browser:
costruzione dei parametri dal form, avvisi di errore e grafici.
"""

import dash_bootstrap_components as dbc

from src.dashboard.app import (
    create_app,
    parametri_da_form,
    crea_analisi,
    crea_riepilogo,
    crea_grafico_limiti,
    crea_grafico_esposizione,
    _curva_esposizione,
)
from src.modules.safety_engine import (
    TransducerParameters,
    TABELLA_ESPOSIZIONE_BMUS,
    valuta_sicurezza,
)


class TestForm:
    """Test per parametri_da_form."""

    def test_valori_form(self):
        """I valori del form diventano TransducerParameters."""
        params = parametri_da_form(5.0, 2.0, 2, 2.87, 1.33, 600, True, 3.0, None, 3.0)

        assert params.focalizzazione_elevazionale is True
        assert params.focalizzazione_azimutale is False
        assert params.assi_focalizzati == {"elevazionale": 3.0}

    def test_campo_vuoto(self):
        """Un campo vuoto produce un errore di input, non un'eccezione."""
        params = parametri_da_form(5.0, None, 2, 2.87, 1.33, 600, False, 3.0, False, 3.0)
        valutazione = valuta_sicurezza(params)

        assert not valutazione.ok
        assert valutazione.errore.campo == "frequenza_mhz"


class TestComponenti:
    """Test per i componenti di analisi e i grafici."""

    def test_analisi_errore_input(self):
        """Un input non valido mostra un avviso rosso."""
        valutazione = valuta_sicurezza(TransducerParameters(pressione_kpa=-1))
        componente = crea_analisi(valutazione)

        assert isinstance(componente, dbc.Alert)
        assert componente.color == "danger"

    def test_analisi_geometria(self):
        """La geometria non supportata mostra un avviso giallo."""
        valutazione = valuta_sicurezza(TransducerParameters(
            focalizzazione_azimutale=True,
            profondita_focale_azimutale_cm=0.5,
        ))
        componente = crea_analisi(valutazione)

        assert isinstance(componente, dbc.Alert)
        assert componente.color == "warning"

    def test_riepilogo_senza_risultato(self):
        """Senza metriche il riepilogo è un messaggio."""
        valutazione = valuta_sicurezza(TransducerParameters(cicli=0))

        assert "Nessun risultato" in crea_riepilogo(valutazione).children

    def test_grafico_limiti(self, parametri_standard):
        """Il grafico dei limiti mostra cinque barre in percentuale."""
        fig = crea_grafico_limiti(valuta_sicurezza(parametri_standard))

        assert len(fig.data) == 1
        barre = fig.data[0]
        assert len(barre.x) == 5
        # TIC BMUS: 2.391 / 3
        assert 79 < barre.y[3] < 80

    def test_grafico_limiti_errore(self):
        """Con errore il grafico è vuoto."""
        fig = crea_grafico_limiti(valuta_sicurezza(TransducerParameters(altezza_cm=0)))

        assert len(fig.data) == 0

    def test_grafico_esposizione(self):
        """Una curva per BMUS e una per ITRUSST."""
        fig = crea_grafico_esposizione(2.391)

        assert [t.name for t in fig.data] == ["BMUS", "ITRUSST"]

    def test_curva_esposizione(self):
        """La curva a gradini termina a zero oltre l'ultima soglia."""
        x, y = _curva_esposizione(TABELLA_ESPOSIZIONE_BMUS, 6.0, 120.0)

        assert len(x) == len(y)
        assert x[0] == 0.0 and y[0] == 120.0
        assert x[-1] == 6.0 and y[-1] == 0.0
        assert x == sorted(x)


class TestApp:
    """Test per la creazione dell'applicazione."""

    def test_create_app(self):
        """L'applicazione ha un layout e i callback registrati."""
        app = create_app()

        assert app.layout is not None
        assert len(app.callback_map) == 2
