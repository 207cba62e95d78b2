# Test unitari per classificazione e valutazione
"""
Test per:
    - Tabelle dei tempi massimi di esposizione (BMUS, ITRUSST)
    - classifica_metriche e soglie strette
    - valuta_sicurezza e report_sicurezza
"""

import json
import math
from dataclasses import replace

import pytest

from src.core.units import Q_
from src.modules.safety_engine import (
    InvalidInputError,
    UnsupportedFocusGeometryError,
    calcola_metriche_sicurezza,
    classifica_metriche,
    cerca_tempo_esposizione,
    tempo_esposizione_massimo_bmus,
    tempo_esposizione_massimo_itrusst,
    valuta_sicurezza,
    report_sicurezza,
)


class TestTabelleEsposizione:
    """Test per le funzioni a gradini dei tempi di esposizione."""

    @pytest.mark.parametrize("tic,minuti", [
        (0.0, math.inf),
        (0.7, math.inf),
        (0.71, 60),
        (1.0, 60),
        (1.5, 30),
        (2.0, 15),
        (2.391, 4),
        (2.5, 4),
        (3.0, 1),
        (3.01, 0),
        (10.0, 0),
    ])
    def test_bmus(self, tic, minuti):
        """Soglie BMUS inclusive."""
        assert tempo_esposizione_massimo_bmus(tic) == minuti

    @pytest.mark.parametrize("tic,minuti", [
        (0.0, math.inf),
        (1.5, math.inf),
        (1.6, 80),
        (2.5, 40),
        (3.0, 10),
        (3.5, 2.67),
        (4.5, 0.67),
        (5.0, 0.17),
        (5.01, 0),
    ])
    def test_itrusst(self, tic, minuti):
        """Soglie ITRUSST inclusive."""
        assert tempo_esposizione_massimo_itrusst(tic) == minuti

    def test_tabella_personalizzata(self):
        """La ricerca scandisce la tabella in ordine."""
        tabella = [(1.0, 10.0), (2.0, 5.0)]

        assert cerca_tempo_esposizione(0.5, tabella) == 10.0
        assert cerca_tempo_esposizione(1.5, tabella) == 5.0
        assert cerca_tempo_esposizione(2.5, tabella) == 0.0


class TestClassificazione:
    """Test per classifica_metriche."""

    def test_scenario_riferimento_conforme(self, parametri_standard):
        """Lo scenario di riferimento supera tutti i controlli."""
        v = classifica_metriche(calcola_metriche_sicurezza(parametri_standard))

        assert v.mi_ok and v.isppa_ok and v.ispta_ok
        assert v.tic_bmus_ok and v.tic_itrusst_ok
        assert v.conforme
        assert v.esposizione_bmus_min == 4
        assert v.esposizione_itrusst_min == 40

    def test_mi_al_limite_non_conforme(self, parametri_standard):
        """MI = 1.9 non supera il controllo (soglia stretta)."""
        m = replace(calcola_metriche_sicurezza(parametri_standard), indice_meccanico=1.9)

        assert not classifica_metriche(m).mi_ok
        assert classifica_metriche(replace(m, indice_meccanico=1.8999)).mi_ok

    def test_isppa_al_limite_non_conforme(self, parametri_standard):
        """ISPPA = 190 W/cm² non supera il controllo."""
        m = calcola_metriche_sicurezza(parametri_standard)

        assert not classifica_metriche(replace(m, intensita_picco=Q_(190, "W/cm^2"))).isppa_ok
        assert classifica_metriche(replace(m, intensita_picco=Q_(189.99, "W/cm^2"))).isppa_ok

    def test_ispta_al_limite_non_conforme(self, parametri_standard):
        """ISPTA = 720 mW/cm² non supera il controllo."""
        m = calcola_metriche_sicurezza(parametri_standard)

        assert not classifica_metriche(replace(m, intensita_media=Q_(720, "mW/cm^2"))).ispta_ok
        assert classifica_metriche(replace(m, intensita_media=Q_(719.9, "mW/cm^2"))).ispta_ok

    def test_ispta_unita_diverse(self, parametri_standard):
        """Il confronto avviene in mW/cm² indipendentemente dall'unità."""
        m = calcola_metriche_sicurezza(parametri_standard)

        assert not classifica_metriche(replace(m, intensita_media=Q_(0.8, "W/cm^2"))).ispta_ok

    def test_tic_limiti(self, parametri_standard):
        """TIC = 3 fallisce BMUS ma non ITRUSST; TIC = 6 fallisce entrambi."""
        m = calcola_metriche_sicurezza(parametri_standard)

        v3 = classifica_metriche(replace(m, tic=3.0))
        v6 = classifica_metriche(replace(m, tic=6.0))

        assert not v3.tic_bmus_ok and v3.tic_itrusst_ok
        assert not v6.tic_bmus_ok and not v6.tic_itrusst_ok
        assert not v3.conforme

    def test_focalizzazione_supera_limiti(self, parametri_standard):
        """Un fuoco stretto ad alta pressione supera MI e ISPPA."""
        params = replace(
            parametri_standard,
            pressione_kpa=1500,
            focalizzazione_elevazionale=True,
            profondita_focale_elevazionale_cm=2.0,
            focalizzazione_azimutale=True,
            profondita_focale_azimutale_cm=2.0,
        )

        v = classifica_metriche(calcola_metriche_sicurezza(params))

        assert not v.mi_ok
        assert not v.isppa_ok
        assert not v.conforme

    def test_to_dict_esposizione_illimitata(self, parametri_standard):
        """L'esposizione illimitata è serializzata come None."""
        m = replace(calcola_metriche_sicurezza(parametri_standard), tic=0.5)
        dati = classifica_metriche(m).to_dict()

        assert dati["esposizione_bmus_min"] is None
        assert dati["esposizione_itrusst_min"] is None
        assert dati["conforme"] is True


class TestValutazione:
    """Test per valuta_sicurezza e report_sicurezza."""

    def test_valutazione_riuscita(self, parametri_standard):
        """Una valutazione riuscita contiene metriche e verdetto."""
        val = valuta_sicurezza(parametri_standard)

        assert val.ok
        assert val.errore is None
        assert val.metriche.indice_meccanico == pytest.approx(0.6 / math.sqrt(2), rel=1e-9)
        assert val.verdetto.conforme

    def test_input_non_valido(self, parametri_standard):
        """Un input non valido è riportato come errore, senza metriche."""
        val = valuta_sicurezza(replace(parametri_standard, frequenza_mhz=float("nan")))

        assert not val.ok
        assert isinstance(val.errore, InvalidInputError)
        assert val.errore.campo == "frequenza_mhz"
        assert val.metriche is None
        assert val.verdetto is None

    def test_geometria_non_supportata(self, parametri_standard):
        """La geometria non supportata è un errore distinto."""
        val = valuta_sicurezza(replace(
            parametri_standard,
            focalizzazione_elevazionale=True,
            profondita_focale_elevazionale_cm=1.0,
        ))

        assert not val.ok
        assert isinstance(val.errore, UnsupportedFocusGeometryError)
        assert val.to_dict()["errore"]["codice"] == "geometria_focale_non_supportata"

    def test_to_dict_serializzabile_json(self, parametri_focalizzati):
        """La valutazione è serializzabile in JSON."""
        dati = valuta_sicurezza(parametri_focalizzati).to_dict()

        testo = json.dumps(dati)
        assert json.loads(testo)["ok"] is True
        assert dati["parametri"]["profondita_focale_azimutale_cm"] == 4.0

    def test_to_dict_errore(self, parametri_standard):
        """Gli errori di input riportano il campo."""
        dati = valuta_sicurezza(replace(parametri_standard, cicli=0)).to_dict()

        assert dati["ok"] is False
        assert dati["metriche"] is None
        assert dati["errore"]["codice"] == "input_non_valido"
        assert dati["errore"]["campo"] == "cicli"

    def test_report_conforme(self, parametri_standard):
        """Il report contiene le metriche e l'esito."""
        report = report_sicurezza(valuta_sicurezza(parametri_standard))

        assert "REPORT SICUREZZA" in report
        assert "MI:" in report
        assert "4 min" in report
        assert "ESITO: CONFORME" in report

    def test_report_errore(self, parametri_standard):
        """Il report di un errore mostra il codice dell'errore."""
        report = report_sicurezza(valuta_sicurezza(replace(parametri_standard, larghezza_cm=-1)))

        assert "ERRORE:" in report
        assert "input_non_valido" in report
        assert "larghezza_cm" in report
