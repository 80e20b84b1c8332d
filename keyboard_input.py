"""
Traducción de teclas a tokens de la calculadora.

Las teclas se nombran como en un navegador ("Enter", "Backspace",
"Escape" o el carácter pulsado). ``key_from_event`` adapta los eventos
de tkinter a esos nombres.
"""

import logging


logger = logging.getLogger(__name__)

KEY_TOKENS = {
    "+": "+",
    "-": "-",
    "*": "×",
    "/": "÷",
    "Enter": "=",
    # Retroceso borra todo, igual que Escape
    "Backspace": "C",
    "Escape": "C",
}

_TK_KEYSYMS = {
    "Return": "Enter",
    "KP_Enter": "Enter",
    "BackSpace": "Backspace",
    "Escape": "Escape",
}


def token_for_key(key: str):
    """Token asociado a ``key`` o None si la tecla no hace nada."""
    if len(key) == 1 and ((key.isdigit() and key.isascii()) or key == "."):
        return key
    return KEY_TOKENS.get(key)


def key_from_event(event) -> str:
    keysym = getattr(event, "keysym", "")
    if keysym in _TK_KEYSYMS:
        return _TK_KEYSYMS[keysym]
    return getattr(event, "char", "") or keysym


class KeyboardBinding:
    """Registro del teclado limitado a un bloque ``with``.

    Al entrar se enlaza ``<Key>`` en ``widget``; al salir (también por una
    excepción) se elimina el enlace.
    """

    SEQUENCE = "<Key>"

    def __init__(self, widget, on_token):
        self._widget = widget
        self._on_token = on_token
        self._funcid = None

    @property
    def active(self) -> bool:
        return self._funcid is not None

    def _on_key(self, event):
        token = token_for_key(key_from_event(event))
        if token is None:
            return None
        self._on_token(token)
        return "break"

    def acquire(self):
        if self._funcid is None:
            self._funcid = self._widget.bind(self.SEQUENCE, self._on_key, "+")
            logger.debug("teclado enlazado (%s)", self._funcid)
        return self

    def release(self):
        if self._funcid is None:
            return
        funcid, self._funcid = self._funcid, None
        self._widget.unbind(self.SEQUENCE, funcid)
        logger.debug("teclado liberado (%s)", funcid)

    def __enter__(self):
        return self.acquire()

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
