# Dashboard calcolatore di sicurezza tFUS
"""
Applicazione Dash principale per il calcolatore di sicurezza.

Permette di:
    - Inserire i parametri dell'impulso e del trasduttore
    - Richiamare configurazioni predefinite
    - Abilitare la focalizzazione elevazionale e azimutale
    - Visualizzare metriche, controlli e tempi massimi di esposizione

La dashboard non contiene logica di calcolo: ogni modifica dei parametri
richiama valuta_sicurezza e mostra il risultato o l'errore.
"""

import math

import dash
from dash import dcc, html, Input, Output
import dash_bootstrap_components as dbc
import plotly.graph_objects as go
import numpy as np

# Import moduli tFUS
from ..core.constants import SafetyLimits
from ..core.presets import TransducerPresets
from ..modules.safety_engine import (
    TransducerParameters,
    SafetyAssessment,
    UnsupportedFocusGeometryError,
    valuta_sicurezza,
    TABELLA_ESPOSIZIONE_BMUS,
    TABELLA_ESPOSIZIONE_ITRUSST,
)


# Stili CSS
CARD_STYLE = {
    "margin": "10px",
    "padding": "15px",
    "borderRadius": "10px",
    "boxShadow": "0 4px 6px rgba(0, 0, 0, 0.1)",
}

HEADER_STYLE = {
    "backgroundColor": "#2c3e50",
    "color": "white",
    "padding": "20px",
    "marginBottom": "20px",
    "borderRadius": "0 0 10px 10px",
}

# (id campo, etichetta, passo)
CAMPI_NUMERICI = [
    ("frequenza_ripetizione_khz", "Frequenza di Ripetizione (kHz)", 0.1),
    ("frequenza_mhz", "Frequenza (MHz)", 0.1),
    ("cicli", "Cicli per Impulso", 1),
    ("larghezza_cm", "Larghezza Trasduttore (cm)", 0.01),
    ("altezza_cm", "Altezza Trasduttore (cm)", 0.01),
    ("pressione_kpa", "Pressione Onda Piana (kPa)", 10),
]

CAMPI_FOCALI = [
    ("elevazionale", "Focalizzazione Elevazionale"),
    ("azimutale", "Focalizzazione Azimutale"),
]

PRESETS = TransducerPresets()


def create_app():
    """Crea e configura l'applicazione Dash."""

    app = dash.Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        title="tFUS Safety Calculator",
        suppress_callback_exceptions=True,
    )

    app.layout = create_layout()
    register_callbacks(app)

    return app


def _campo_numerico(campo, etichetta, passo, valore):
    return dbc.Col([
        html.Label(etichetta),
        dbc.Input(id=f"input-{campo}", type="number", value=valore, step=passo),
    ], width=6)


def create_layout():
    """Crea il layout della dashboard."""

    default = PRESETS.get_preset("piano_2mhz")

    return dbc.Container([
        # Header
        html.Div([
            html.H1("Calcolatore di Sicurezza tFUS", className="text-center"),
            html.P(
                "Metriche di sicurezza per ultrasuono focalizzato transcranico",
                className="text-center lead"
            ),
        ], style=HEADER_STYLE),

        dbc.Row([
            # Colonna sinistra: Parametri
            dbc.Col([
                dbc.Card([
                    dbc.CardHeader(html.H5("Parametri di Ingresso")),
                    dbc.CardBody([
                        html.Label("Configurazione Predefinita"),
                        dcc.Dropdown(
                            id="dropdown-preset",
                            options=[
                                {"label": nome.replace("_", " ").title(), "value": nome}
                                for nome in PRESETS.list_presets()
                            ],
                            value="piano_2mhz",
                            clearable=False,
                        ),
                        html.Br(),
                        dbc.Row([
                            _campo_numerico(campo, etichetta, passo, getattr(default, campo))
                            for campo, etichetta, passo in CAMPI_NUMERICI
                        ], className="g-3"),
                    ]),
                ], style=CARD_STYLE),

                dbc.Card([
                    dbc.CardHeader(html.H5("Focalizzazione")),
                    dbc.CardBody([
                        dbc.Row([
                            dbc.Col([
                                dbc.Checkbox(
                                    id=f"check-{asse}",
                                    label=etichetta,
                                    value=getattr(default, f"focalizzazione_{asse}"),
                                ),
                            ], width=6),
                            dbc.Col([
                                html.Label("Profondità Focale (cm)"),
                                dbc.Input(
                                    id=f"input-profondita-{asse}",
                                    type="number",
                                    step=0.1,
                                    value=getattr(default, f"profondita_focale_{asse}_cm"),
                                ),
                            ], width=6),
                        ], className="mb-3")
                        for asse, etichetta in CAMPI_FOCALI
                    ]),
                ], style=CARD_STYLE),
            ], width=4),

            # Colonna destra: Risultati
            dbc.Col([
                dbc.Card([
                    dbc.CardHeader(html.H5("Analisi di Sicurezza")),
                    dbc.CardBody([html.Div(id="output-analisi")]),
                ], style=CARD_STYLE),

                dbc.Row([
                    dbc.Col([
                        dbc.Card([
                            dbc.CardHeader("Metriche rispetto ai Limiti"),
                            dbc.CardBody([
                                dcc.Graph(id="graph-limiti", style={"height": "350px"}),
                            ]),
                        ], style=CARD_STYLE),
                    ], width=6),

                    dbc.Col([
                        dbc.Card([
                            dbc.CardHeader("Tempo Massimo di Esposizione"),
                            dbc.CardBody([
                                dcc.Graph(id="graph-esposizione", style={"height": "350px"}),
                            ]),
                        ], style=CARD_STYLE),
                    ], width=6),
                ]),

                dbc.Card([
                    dbc.CardHeader("Grandezze Derivate"),
                    dbc.CardBody([html.Div(id="output-riepilogo")]),
                ], style=CARD_STYLE),
            ], width=8),
        ]),

        # Footer
        html.Footer([
            html.Hr(),
            html.P(
                "Limiti: FDA (MI 1.9, ISPPA 190 W/cm², ISPTA 720 mW/cm²), "
                "BMUS (TIC 3 °C), ITRUSST (TIC 6 °C)",
                className="text-center text-muted"
            ),
        ]),

        # Store per la valutazione corrente
        dcc.Store(id="store-valutazione"),

    ], fluid=True)


def parametri_da_form(
    frequenza_ripetizione_khz,
    frequenza_mhz,
    cicli,
    larghezza_cm,
    altezza_cm,
    pressione_kpa,
    focalizzazione_elevazionale,
    profondita_focale_elevazionale_cm,
    focalizzazione_azimutale,
    profondita_focale_azimutale_cm,
) -> TransducerParameters:
    """
    Costruisce i parametri dai valori del form.

    I campi vuoti arrivano come None e sono segnalati dalla validazione.
    """
    return TransducerParameters(
        frequenza_ripetizione_khz=frequenza_ripetizione_khz,
        frequenza_mhz=frequenza_mhz,
        cicli=cicli,
        larghezza_cm=larghezza_cm,
        altezza_cm=altezza_cm,
        pressione_kpa=pressione_kpa,
        focalizzazione_elevazionale=bool(focalizzazione_elevazionale),
        profondita_focale_elevazionale_cm=profondita_focale_elevazionale_cm,
        focalizzazione_azimutale=bool(focalizzazione_azimutale),
        profondita_focale_azimutale_cm=profondita_focale_azimutale_cm,
    )


def register_callbacks(app):
    """Registra i callback della dashboard."""

    campi_input = [Input(f"input-{campo}", "value") for campo, _, _ in CAMPI_NUMERICI]
    for asse, _ in CAMPI_FOCALI:
        campi_input.append(Input(f"check-{asse}", "value"))
        campi_input.append(Input(f"input-profondita-{asse}", "value"))

    @app.callback(
        [Output(f"input-{campo}", "value") for campo, _, _ in CAMPI_NUMERICI]
        + [
            output
            for asse, _ in CAMPI_FOCALI
            for output in (
                Output(f"check-{asse}", "value"),
                Output(f"input-profondita-{asse}", "value"),
            )
        ],
        Input("dropdown-preset", "value"),
        prevent_initial_call=True,
    )
    def applica_preset(nome):
        """Copia il preset selezionato nei campi del form."""
        params = PRESETS.get_preset(nome)
        valori = [getattr(params, campo) for campo, _, _ in CAMPI_NUMERICI]
        for asse, _ in CAMPI_FOCALI:
            valori.append(getattr(params, f"focalizzazione_{asse}"))
            valori.append(getattr(params, f"profondita_focale_{asse}_cm"))
        return valori

    @app.callback(
        [
            Output("output-analisi", "children"),
            Output("output-riepilogo", "children"),
            Output("graph-limiti", "figure"),
            Output("graph-esposizione", "figure"),
            Output("store-valutazione", "data"),
        ],
        campi_input,
    )
    def aggiorna_valutazione(
        prf_khz, f_mhz, cicli, larghezza_cm, altezza_cm, pressione_kpa,
        fuoco_elev, profondita_elev, fuoco_azim, profondita_azim,
    ):
        """Ricalcola la valutazione a ogni modifica dei parametri."""

        params = parametri_da_form(
            prf_khz, f_mhz, cicli, larghezza_cm, altezza_cm, pressione_kpa,
            fuoco_elev, profondita_elev, fuoco_azim, profondita_azim,
        )
        valutazione = valuta_sicurezza(params)

        tic = valutazione.metriche.tic if valutazione.ok else None

        return (
            crea_analisi(valutazione),
            crea_riepilogo(valutazione),
            crea_grafico_limiti(valutazione),
            crea_grafico_esposizione(tic),
            valutazione.to_dict(),
        )


def _riga_controllo(titolo, ok, testo):
    """Riga di un controllo con esito colorato."""
    return html.Div([
        html.H6(titolo),
        html.Div([
            dbc.Badge("OK" if ok else "SUPERATO", color="success" if ok else "danger", className="me-2"),
            html.Span(testo),
        ]),
    ], className="border-bottom pb-2 mb-2")


def _formatta_minuti(minuti):
    return "illimitato" if math.isinf(minuti) else f"{minuti:g} minuti"


def crea_analisi(valutazione: SafetyAssessment):
    """Crea i controlli di sicurezza, oppure l'avviso di errore."""

    if not valutazione.ok:
        errore = valutazione.errore
        if isinstance(errore, UnsupportedFocusGeometryError):
            return dbc.Alert([
                html.H6("Geometria focale non supportata"),
                html.P(str(errore), className="mb-0"),
            ], color="warning")
        return dbc.Alert([
            html.H6("Parametri non validi"),
            html.P(str(errore), className="mb-0"),
        ], color="danger")

    m = valutazione.metriche
    v = valutazione.verdetto

    return html.Div([
        _riga_controllo(
            "Indice Meccanico",
            v.mi_ok,
            f"{m.indice_meccanico:.2f} (Limite: {SafetyLimits.INDICE_MECCANICO_MAX})",
        ),
        _riga_controllo(
            "Intensità di Picco (ISPPA)",
            v.isppa_ok,
            f"{m.intensita_picco.to('W/cm^2').magnitude:.2f} W/cm² "
            f"(Limite: {SafetyLimits.ISPPA_MAX.magnitude:g} W/cm²)",
        ),
        _riga_controllo(
            "Intensità Media (ISPTA)",
            v.ispta_ok,
            f"{m.intensita_media.to('mW/cm^2').magnitude:.2f} mW/cm² "
            f"(Limite: {SafetyLimits.ISPTA_MAX.magnitude:g} mW/cm²)",
        ),
        _riga_controllo(
            "Indice Termico Cranico (TIC)",
            v.tic_bmus_ok,
            f"{m.tic:.2f} °C (Limite BMUS: {SafetyLimits.TIC_MAX_BMUS:g} °C, "
            f"Limite ITRUSST: {SafetyLimits.TIC_MAX_ITRUSST:g} °C)",
        ),
        dbc.Alert([
            html.H6("Tempi Massimi di Esposizione"),
            html.P(f"BMUS: {_formatta_minuti(v.esposizione_bmus_min)}", className="mb-1"),
            html.P(f"ITRUSST: {_formatta_minuti(v.esposizione_itrusst_min)}", className="mb-0"),
        ], color="info" if v.conforme else "danger"),
    ])


def crea_riepilogo(valutazione: SafetyAssessment):
    """Crea il riepilogo delle grandezze derivate."""

    if not valutazione.ok:
        return html.P("Nessun risultato disponibile.", className="text-muted")

    m = valutazione.metriche
    voci = [
        ("Durata Impulso", f"{m.durata_impulso.to('us').magnitude:.3f} μs"),
        ("Duty Cycle", f"{m.duty_cycle_percentuale:.3f} %"),
        ("Pressione al Fuoco", f"{m.pressione_focale_mpa:.3f} MPa"),
        ("Guadagno Focale", f"{m.guadagno_focale:.2f}"),
        ("Potenza", f"{m.potenza_trasduttore.to('mW').magnitude:.1f} mW"),
        ("Diametro Equivalente", f"{m.diametro_equivalente.to('cm').magnitude:.2f} cm"),
    ]

    return dbc.Row([
        dbc.Col([
            html.H6(titolo),
            html.P(valore, className="h5 text-primary"),
        ], width=2)
        for titolo, valore in voci
    ])


def crea_grafico_limiti(valutazione: SafetyAssessment):
    """Crea il grafico a barre delle metriche normalizzate al limite."""

    fig = go.Figure()

    if valutazione.ok:
        m = valutazione.metriche
        nomi = ["MI", "ISPPA", "ISPTA", "TIC (BMUS)", "TIC (ITRUSST)"]
        rapporti = np.array([
            m.indice_meccanico / SafetyLimits.INDICE_MECCANICO_MAX,
            (m.intensita_picco / SafetyLimits.ISPPA_MAX).to("dimensionless").magnitude,
            (m.intensita_media / SafetyLimits.ISPTA_MAX).to("dimensionless").magnitude,
            m.tic / SafetyLimits.TIC_MAX_BMUS,
            m.tic / SafetyLimits.TIC_MAX_ITRUSST,
        ])
        colori = np.where(rapporti < 1, "seagreen", "crimson")

        fig.add_trace(go.Bar(
            x=nomi,
            y=rapporti * 100,
            marker_color=list(colori),
            text=[f"{r * 100:.1f}%" for r in rapporti],
            textposition="auto",
        ))

    fig.add_hline(y=100, line_dash="dash", line_color="red",
                  annotation_text="Limite")

    fig.update_layout(
        yaxis_title="Percentuale del Limite (%)",
        showlegend=False,
        margin=dict(l=40, r=40, t=40, b=40),
    )

    return fig


def _curva_esposizione(tabella, tic_max, minuti_illimitati):
    """Punti (tic, minuti) della funzione a gradini, illimitato reso come valore finito."""
    x, y = [], []
    inizio = 0.0
    for soglia, minuti in tabella:
        valore = minuti_illimitati if math.isinf(minuti) else minuti
        x.extend([inizio, soglia])
        y.extend([valore, valore])
        inizio = soglia
    x.extend([inizio, tic_max])
    y.extend([0.0, 0.0])
    return x, y


def crea_grafico_esposizione(tic=None):
    """Crea il grafico dei tempi massimi di esposizione BMUS e ITRUSST."""

    tic_max = 6.0
    # I tempi illimitati sono mostrati come 120 minuti
    illimitato = 120.0

    fig = go.Figure()

    for nome, tabella, colore in [
        ("BMUS", TABELLA_ESPOSIZIONE_BMUS, "blue"),
        ("ITRUSST", TABELLA_ESPOSIZIONE_ITRUSST, "orange"),
    ]:
        x, y = _curva_esposizione(tabella, tic_max, illimitato)
        fig.add_trace(go.Scatter(
            x=x, y=y,
            mode="lines",
            name=nome,
            line=dict(color=colore, width=2),
        ))

    if tic is not None:
        fig.add_vline(x=min(tic, tic_max), line_dash="dash", line_color="red",
                      annotation_text=f"TIC {tic:.2f}")

    fig.update_layout(
        xaxis_title="TIC (°C)",
        yaxis_title="Esposizione Massima (min)",
        yaxis=dict(range=[0, illimitato * 1.05]),
        showlegend=True,
        margin=dict(l=40, r=40, t=40, b=40),
    )

    return fig


def run_dashboard(host="127.0.0.1", port=8050, debug=True):
    """Avvia la dashboard."""
    app = create_app()
    print(f"\n{'='*50}")
    print("tFUS Safety Calculator Dashboard")
    print(f"{'='*50}")
    print(f"Apri il browser a: http://{host}:{port}")
    print(f"{'='*50}\n")
    app.run(host=host, port=port, debug=debug)


# Entry point per esecuzione diretta
if __name__ == "__main__":
    run_dashboard()
