from __future__ import annotations

import logging
from typing import MutableMapping, Optional, Union

from convertidor import temp_utils
from convertidor.config import KEY_CELSIUS, KEY_PULSO, KEY_PULSO_N
from convertidor.temp_utils import Empty, InvalidNumericInput, Valid, ValidationState

logger = logging.getLogger(__name__)


class TemperatureForm:
    """
    Controlador del formulario Celsius → Fahrenheit.

    Solo guarda el texto crudo y la señal de animación en ``store``
    (``st.session_state`` en la app, un ``dict`` en los tests). La validación
    y el resultado se recalculan del texto en cada lectura, nunca se guardan.
    """

    def __init__(self, store: MutableMapping):
        self.store = store
        store.setdefault(KEY_CELSIUS, "")
        store.setdefault(KEY_PULSO, False)
        store.setdefault(KEY_PULSO_N, 0)

    # --- Estado ---
    @property
    def celsius_input(self) -> str:
        return self.store[KEY_CELSIUS]

    @property
    def validation(self) -> ValidationState:
        return temp_utils.validate(self.celsius_input)

    @property
    def fahrenheit(self) -> Optional[float]:
        return temp_utils.fahrenheit_of(self.validation)

    @property
    def pulse(self) -> bool:
        return self.store[KEY_PULSO]

    @property
    def pulse_generation(self) -> int:
        return self.store[KEY_PULSO_N]

    # --- Operaciones ---
    def set_input(self, text: str) -> None:
        self.store[KEY_CELSIUS] = text
        self.sync()

    def sync(self) -> None:
        """Reacciona a un texto nuevo ya escrito en ``store`` (on_change)."""
        text = self.celsius_input
        if text == "":
            return
        try:
            temp_utils.parse_celsius(text)
        except InvalidNumericInput as exc:
            logger.debug("Entrada rechazada: %s", exc)
            return
        # apagar y encender para que la transición se repita aunque el valor no cambie
        self.store[KEY_PULSO] = False
        self.store[KEY_PULSO] = True
        self.store[KEY_PULSO_N] = self.pulse_generation + 1

    def set_preset(self, celsius: Union[int, float]) -> None:
        logger.debug("Ejemplo rápido: %s°C", celsius)
        self.set_input(temp_utils.number_text(celsius))

    def clear(self) -> None:
        self.store[KEY_CELSIUS] = ""
        self.store[KEY_PULSO] = False
        self.store[KEY_PULSO_N] = 0

    # --- Presentación ---
    @staticmethod
    def format_display(value: float) -> str:
        return temp_utils.format_display(value)

    def formula_text(self) -> str:
        return temp_utils.formula_text(self.validation)

    def result_text(self) -> str:
        return temp_utils.result_text(self.validation)

    @property
    def error_message(self) -> Optional[str]:
        state = self.validation
        if isinstance(state, (Valid, Empty)):
            return None
        return state.reason
