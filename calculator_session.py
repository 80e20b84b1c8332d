"""Sesión de calculadora: dueña única del estado durante la ejecución."""

import logging

from calculator_engine import CalculatorEngine
from calculator_state import initial_state
from input_reducer import project, reduce


logger = logging.getLogger(__name__)


class CalculatorSession:
    """Aplica tokens al estado y avisa a los renderizadores tras cada cambio."""

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculatorEngine()
        self._state = initial_state()
        self._renderers = []

    @property
    def state(self):
        return self._state

    @property
    def view(self):
        return project(self._state)

    # ── Entrada ──────────────────────────────────────────────────

    def press(self, token: str):
        before = self._state
        self._state = reduce(before, token, self.engine)

        if self._state is before:
            logger.debug("token %r sin efecto (pantalla %r)", token, before.display)
        else:
            logger.debug(
                "token %r: %r -> %r (operando=%r, operador=%r)",
                token,
                before.display,
                self._state.display,
                self._state.operand,
                self._state.operator,
            )
        if self._state.history is not before.history:
            logger.info("historial: %s", self._state.history[0])

        view = self.view
        for renderer in list(self._renderers):
            renderer(view)
        return view

    def press_many(self, tokens):
        view = self.view
        for token in tokens:
            view = self.press(token)
        return view

    def reset(self):
        return self.press("C")

    # ── Renderizadores ───────────────────────────────────────────

    def subscribe(self, renderer):
        """Registra ``renderer(view)``; devuelve la función para darlo de baja."""
        self._renderers.append(renderer)
        renderer(self.view)

        def unsubscribe():
            if renderer in self._renderers:
                self._renderers.remove(renderer)

        return unsubscribe
