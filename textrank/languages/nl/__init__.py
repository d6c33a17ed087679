from typing import Optional, Set

from textrank.languages import (
    SpaceSeparatedWordsMixIn,
    SentenceSplitterMixIn,
    PyStemmerMixIn,
    SpaCyTaggerMixIn,
    StopWordsFromFileMixIn,
)
from textrank.util.config import get_config
from textrank.util.log import create_logger

log = create_logger(__name__)


class DutchLanguage(SpaceSeparatedWordsMixIn,
                    SentenceSplitterMixIn,
                    PyStemmerMixIn,
                    SpaCyTaggerMixIn,
                    StopWordsFromFileMixIn):
    """Dutch language support module.

    Part-of-speech tagger model gets loaded once and is shared by all instances that use the same model."""

    # Used when the configuration doesn't name a model
    __DEFAULT_SPACY_MODEL = 'nl_core_news_sm'

    # "'s morgens", "'t huis", "'k weet", "'n boek" ("zo'n" is kept whole by the tokenizer already)
    __ELIDED_WORDS = {'s', 't', 'k', 'n'}

    def __init__(self, model: Optional[str] = None):
        """Constructor.

        :param model: spaCy model package name or path to the model directory; read from configuration if None.
        """
        super().__init__()

        if model is None:
            config = get_config()
            model = (config['languages'].get('nl') or dict()).get('spacy_model', self.__DEFAULT_SPACY_MODEL)

        self.__spacy_model = model

        # Load resources upfront so that a missing model gets reported on construction
        self.spacy_pipeline()

    @staticmethod
    def language_code() -> str:
        return "nl"

    @staticmethod
    def sample_sentence() -> str:
        return "Pa’s wijze lynx bezag vroom het fikse aquaduct."

    def spacy_model(self) -> str:
        return self.__spacy_model

    def elided_words(self) -> Set[str]:
        return self.__ELIDED_WORDS
