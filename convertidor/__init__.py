"""Convertidor de temperatura Celsius → Fahrenheit (Streamlit)."""
