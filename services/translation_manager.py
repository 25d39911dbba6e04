# -*- coding: utf-8 -*-
"""Centralized message catalogue for user-visible strings."""

from typing import Callable, Dict, List

from services.translations.en import EN_TRANSLATIONS
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton message catalogue. Unknown keys are returned unchanged."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = "en"
            cls._instance._translations = {"en": EN_TRANSLATIONS}
            cls._instance._listeners: List[Callable] = []
        return cls._instance

    def register(self, lang_code: str, catalogue: Dict[str, str]):
        """Add or extend a catalogue for a language."""
        self._translations.setdefault(lang_code, {}).update(catalogue)

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"No catalogue for language '{lang_code}', keeping '{self._current_language}'")
            return
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in self._listeners:
                callback(lang_code)

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            translation = EN_TRANSLATIONS.get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format message '{key}' with {kwargs}")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
