from typing import Union

from textrank.languages import LanguageModel
from textrank.languages.nl import DutchLanguage
from textrank.util.config import get_config
from textrank.util.log import create_logger

log = create_logger(__name__)


class LanguageFactory(object):
    """Language instance factory."""

    # Supported language codes and their corresponding classes
    __SUPPORTED_LANGUAGES = {
        DutchLanguage.language_code(): DutchLanguage,
    }

    # Static language object instances ({'language code': language object, ... })
    __language_instances = dict()

    @staticmethod
    def enabled_languages() -> set:
        """Return set of supported languages (their codes) that are enabled in the configuration."""
        enabled = set(get_config()['languages']['enabled'])

        for language_code in enabled - set(LanguageFactory.__SUPPORTED_LANGUAGES.keys()):
            log.warning("Language '%s' is enabled in configuration but is not supported." % language_code)

        return enabled & set(LanguageFactory.__SUPPORTED_LANGUAGES.keys())

    @staticmethod
    def language_is_enabled(language_code: str) -> bool:
        """Return True if language is supported + enabled, False if it's not."""
        if language_code is None:
            log.warning("Language code is None.")
            return False

        return language_code in LanguageFactory.enabled_languages()

    @staticmethod
    def language_for_code(language_code: str) -> Union[LanguageModel, None]:
        """Return language module instance for the language code, None if language is not supported."""
        if not LanguageFactory.language_is_enabled(language_code):
            return None

        if language_code not in LanguageFactory.__language_instances:
            language_class = LanguageFactory.__SUPPORTED_LANGUAGES[language_code]
            language = language_class()
            LanguageFactory.__language_instances[language_code] = language

        return LanguageFactory.__language_instances[language_code]

    @staticmethod
    def default_language_code() -> str:
        """Return default language code ('nl' for Dutch)."""
        return DutchLanguage.language_code()

    @staticmethod
    def default_language() -> LanguageModel:
        """Return default language module instance (Dutch)."""
        return LanguageFactory.language_for_code(LanguageFactory.default_language_code())
