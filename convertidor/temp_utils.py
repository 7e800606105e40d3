from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Union

import pandas as pd

# --- Constantes / textos fijos ---
MENSAJE_INVALIDO = "Por favor, ingresa un número válido"
FORMULA_PLANTILLA = "(°C × 9/5) + 32 = °F"
SIN_RESULTADO = "---°F"


@dataclass(frozen=True)
class QuickExample:
    celsius: float
    label: str


QUICK_EXAMPLES: List[QuickExample] = [
    QuickExample(0, "Congelación"),
    QuickExample(25, "Ambiente"),
    QuickExample(37, "Corporal"),
    QuickExample(100, "Ebullición"),
]


# --- Estados de validación (siempre derivados del texto) ---
@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Valid:
    celsius: float

    @property
    def fahrenheit(self) -> float:
        return c_to_f(self.celsius)


@dataclass(frozen=True)
class Invalid:
    reason: str = MENSAJE_INVALIDO


ValidationState = Union[Empty, Valid, Invalid]


class InvalidNumericInput(ValueError):
    """El texto no se puede interpretar como número."""

    def __init__(self, text: str, message: str = MENSAJE_INVALIDO):
        super().__init__(f"{message}: {text!r}")
        self.text = text
        self.message = message


# --- Conversión ---
def c_to_f(c: float) -> float:
    return c * 9.0 / 5.0 + 32.0


def parse_celsius(text: str) -> float:
    """
    Lectura de un número decimal: espacios al inicio/final, signo, punto
    decimal y exponente se aceptan. Los valores fuera de rango (1e400, inf)
    quedan como infinito. NaN y los guiones bajos (1_000) no se aceptan.
    """
    if "_" in text:
        raise InvalidNumericInput(text)
    try:
        value = float(text)
    except ValueError:
        raise InvalidNumericInput(text) from None
    if math.isnan(value):
        raise InvalidNumericInput(text)
    return value


def validate(text: str) -> ValidationState:
    if text == "":
        return Empty()
    try:
        return Valid(parse_celsius(text))
    except InvalidNumericInput as exc:
        return Invalid(exc.message)


# --- Formato de salida ---
def format_display(value: float) -> str:
    """
    Redondeo a un decimal (mitades hacia arriba, sobre el valor binario exacto)
    y sin '.0' final.
      32.0        -> "32"
      98.60000001 -> "98.6"
      34.25       -> "34.3"
      -0.04       -> "0"
      inf         -> "Infinity"
    """
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)
    rounded = float(
        Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    )
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def number_text(value: Union[int, float]) -> str:
    """Texto más corto de un número: 25 -> "25", 25.0 -> "25", 37.5 -> "37.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def result_text(state: ValidationState) -> str:
    if isinstance(state, Valid):
        return f"{format_display(state.fahrenheit)}°F"
    return SIN_RESULTADO


def formula_text(state: ValidationState) -> str:
    if isinstance(state, Valid):
        return (
            f"({format_display(state.celsius)} × 9/5) + 32 = "
            f"{format_display(state.fahrenheit)}"
        )
    return FORMULA_PLANTILLA


def fahrenheit_of(state: ValidationState) -> Optional[float]:
    return state.fahrenheit if isinstance(state, Valid) else None


# --- Tabla de referencia ---
def reference_table() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Ejemplo": ex.label,
                "Celsius (°C)": f"{number_text(ex.celsius)}°C",
                "Fahrenheit (°F)": f"{format_display(c_to_f(ex.celsius))}°F",
            }
            for ex in QUICK_EXAMPLES
        ]
    )
