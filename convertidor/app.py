from __future__ import annotations

import html

import streamlit as st

from convertidor.config import (
    KEY_CELSIUS,
    LAYOUT,
    PAGE_ICON,
    PAGE_TITLE,
    configure_logging,
)
from convertidor.controlador import TemperatureForm
from convertidor.temp_utils import QUICK_EXAMPLES, number_text, reference_table

configure_logging()

st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout=LAYOUT)

# --- Estilos: tarjeta de resultado + animación ---
# Dos keyframes idénticos con nombre distinto: al alternar la clase el navegador repite la animación.
st.markdown(
    """
    <style>
        .result-card {
            background: linear-gradient(135deg, #f97316 0%, #ef4444 100%);
            color: white;
            border-radius: 14px;
            padding: 24px;
            text-align: center;
            margin-bottom: 12px;
        }
        .result-card .result-label { opacity: 0.8; font-size: 0.9rem; }
        .result-card .result-value { font-size: 2.4rem; font-weight: 700; margin: 6px 0; }
        .result-card .result-formula { opacity: 0.7; font-size: 0.9rem; }
        .pulso-a { animation: pulso-a 0.4s ease-out; }
        .pulso-b { animation: pulso-b 0.4s ease-out; }
        @keyframes pulso-a { 0% { transform: scale(0.95); opacity: 0.6; } 100% { transform: scale(1); opacity: 1; } }
        @keyframes pulso-b { 0% { transform: scale(0.95); opacity: 0.6; } 100% { transform: scale(1); opacity: 1; } }
    </style>
""",
    unsafe_allow_html=True,
)

form = TemperatureForm(st.session_state)


# --- Callbacks ---
def on_celsius_change():
    TemperatureForm(st.session_state).sync()


def on_preset(celsius: float):
    TemperatureForm(st.session_state).set_preset(celsius)


def on_clear():
    TemperatureForm(st.session_state).clear()


# --- Encabezado ---
st.title(f"{PAGE_ICON} {PAGE_TITLE}")
st.caption("Convierte grados Celsius a Fahrenheit al instante")

# --- Entrada ---
st.text_input(
    "Temperatura en Celsius (°C)",
    key=KEY_CELSIUS,
    placeholder="Ingresa la temperatura en °C",
    help="Acepta decimales (paso sugerido: 0.1), signo y notación exponencial.",
    on_change=on_celsius_change,
)

if form.error_message:
    # borde rojo + sacudida sobre el campo (contenedor .st-key-<key>)
    st.markdown(
        f"""
        <style>
            .st-key-{KEY_CELSIUS} div[data-baseweb="input"] {{
                border: 2px solid #ef4444;
                animation: error-shake 0.4s ease-in-out;
            }}
            @keyframes error-shake {{
                0%, 100% {{ transform: translateX(0); }}
                25% {{ transform: translateX(-6px); }}
                75% {{ transform: translateX(6px); }}
            }}
        </style>
    """,
        unsafe_allow_html=True,
    )
    st.error(form.error_message, icon="⚠️")

st.markdown("<div style='text-align:center;font-size:1.5rem'>⬇️</div>", unsafe_allow_html=True)

# --- Resultado ---
pulse_class = ""
if form.pulse:
    pulse_class = "pulso-a" if form.pulse_generation % 2 else "pulso-b"
st.markdown(
    f"""
    <div class="result-card {pulse_class}">
        <div class="result-label">Resultado en Fahrenheit</div>
        <div class="result-value">{html.escape(form.result_text())}</div>
        <div class="result-formula">{html.escape(form.formula_text())}</div>
    </div>
""",
    unsafe_allow_html=True,
)

st.button("🔄 Limpiar", on_click=on_clear, key="btn_clear", width="stretch")

st.divider()

# --- Información ---
st.subheader("ℹ️ Información sobre la conversión")
st.markdown(
    """
- **Fórmula:** °F = (°C × 9/5) + 32
- **Punto de congelación del agua:** 0°C = 32°F
- **Punto de ebullición del agua:** 100°C = 212°F
    """
)

# --- Ejemplos rápidos (claves únicas por botón) ---
st.subheader("⚡ Ejemplos rápidos")
cols = st.columns(2)
for i, ejemplo in enumerate(QUICK_EXAMPLES):
    with cols[i % 2]:
        st.button(
            f"{number_text(ejemplo.celsius)}°C · {ejemplo.label}",
            key=f"btn_preset_{number_text(ejemplo.celsius)}",
            on_click=on_preset,
            args=(ejemplo.celsius,),
            width="stretch",
        )

with st.expander("Tabla de referencia"):
    st.dataframe(reference_table(), hide_index=True, width="stretch")
