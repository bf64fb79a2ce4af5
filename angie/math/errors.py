# angie/math/errors.py
"""Ошибки математического суб‑пакета."""


class ParseError(ValueError):
    """Строка не является корректным литералом вектора (строгий разбор)."""

    def __init__(self, message: str, text: str = None):
        super().__init__(f"{message} in {text!r}" if text else message)
        self.text = text
