import abc
import os
import re
import string
from typing import Dict, List, Set

import spacy
from nltk import TweetTokenizer
from sentence_splitter import SentenceSplitter
from spacy.language import Language
from spacy.tokens import Doc
from Stemmer import Stemmer as PyStemmer

from textrank.util.config import get_config
from textrank.util.log import create_logger
from textrank.util.paths import languages_path

log = create_logger(__name__)


class TextRankLanguageException(Exception):
    """Language class exception."""
    pass


class LanguageModel(object, metaclass=abc.ABCMeta):
    """Abstract language class used by the TextRank engine to turn text into graph nodes.

    The engine splits a paragraph into sentences, tokenizes every sentence, tags the tokens with parts of speech and
    then builds a node key for every relevant (noun or adjective) token."""

    @staticmethod
    @abc.abstractmethod
    def language_code() -> str:
        """Return ISO 639-1 language code, e.g. 'nl'."""
        raise NotImplementedError("Abstract method.")

    @staticmethod
    @abc.abstractmethod
    def sample_sentence() -> str:
        """Return sample sentence in the language."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def stop_words_map(self) -> Dict[str, bool]:
        """Return a map of stop words for the language where the keys are all stop words and the values are all True.

        If the stop word list is stored in an external file, you can use StopWordsFromFileMixIn.
        """
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def split_paragraph(self, text: str) -> List[str]:
        """Return a list of sentences for a paragraph text (tokenize text into sentences)."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def tokenize_sentence(self, text: str) -> List[str]:
        """Return a list of lowercase tokens for a sentence, punctuation included."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def tag_tokens(self, tokens: List[str]) -> List[str]:
        """Return a list of part-of-speech tags, one for every token in the list."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def stem_token(self, token: str) -> str:
        """Return stem of a single token."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def is_noun(self, pos: str) -> bool:
        """Return True if part-of-speech tag denotes a noun."""
        raise NotImplementedError("Abstract method.")

    @abc.abstractmethod
    def is_adjective(self, pos: str) -> bool:
        """Return True if part-of-speech tag denotes an adjective."""
        raise NotImplementedError("Abstract method.")

    def is_relevant(self, pos: str) -> bool:
        """Return True if a token with the part-of-speech tag should become a graph node."""
        if not pos:
            return False
        return self.is_noun(pos) or self.is_adjective(pos)

    # noinspection PyMethodMayBeStatic
    def scrub_token(self, text: str) -> str:
        """Normalize token before stemming: strip whitespace and surrounding punctuation, lowercase."""
        if text is None:
            log.warning("Token is None.")
            return ''

        # Normalize apostrophe so that "auto’s" and "auto's" get treated identically
        text = text.replace("’", "'")

        text = text.strip().strip(string.punctuation + '“”„‘«»…').strip()

        return text.lower()

    # noinspection PyMethodMayBeStatic
    def pos_class(self, pos: str) -> str:
        """Return single letter word class of a non-empty part-of-speech tag; tags of one class share the letter."""
        return pos[0]

    def get_node_key(self, text: str, pos: str) -> str:
        """Return a stable graph node key for a token: word class letter of the tag followed by the stem."""
        if not pos:
            raise TextRankLanguageException("Part-of-speech tag for token '%s' is empty." % text)

        return self.pos_class(pos) + self.stem_token(self.scrub_token(text)).lower()

    def is_stop_word(self, token: str) -> bool:
        """Return True if token is a stop word."""
        return self.scrub_token(token) in self.stop_words_map()


class SpaceSeparatedWordsMixIn(LanguageModel, metaclass=abc.ABCMeta):
    """Language in which words are separated by spaces."""

    def __init__(self):
        super().__init__()
        self.__tokenizer = TweetTokenizer(preserve_case=False)

    # noinspection PyMethodMayBeStatic
    def elided_words(self) -> Set[str]:
        """Return words that get written with a leading apostrophe in place of the elided letters (Dutch "'s", "'t").

        TweetTokenizer splits those into an apostrophe and the rest of the word."""
        return set()

    @staticmethod
    def __join_elisions(tokens: List[str], elided_words: Set[str]) -> List[str]:
        """Join apostrophe tokens with the elided word that follows them."""
        joined = []
        i = 0
        while i < len(tokens):
            if tokens[i] == "'" and i + 1 < len(tokens) and tokens[i + 1] in elided_words:
                joined.append("'" + tokens[i + 1])
                i += 2
            else:
                joined.append(tokens[i])
                i += 1
        return joined

    def tokenize_sentence(self, text: str) -> List[str]:
        """Splits a sentence into tokens using spaces (for Latin languages).

        Punctuation tokens are left in place because the tagger needs them; quotes are removed."""
        if text is None:
            log.warning("Sentence is None.")
            return []

        # Normalize apostrophe so that "auto’s" and "auto's" get treated identically
        text = text.replace("’", "'")

        tokens = []
        for token in self.__tokenizer.tokenize(text=text):
            token = token.replace('"', '').lower().strip()

            # Standalone quotes
            if len(token) > 0:
                tokens.append(token)

        elided_words = self.elided_words()
        if elided_words:
            tokens = self.__join_elisions(tokens=tokens, elided_words=elided_words)

        return tokens


class SentenceSplitterMixIn(LanguageModel, metaclass=abc.ABCMeta):
    """Language which is supported by "sentence_splitter" Python module."""

    def __init__(self):
        """Constructor."""
        super().__init__()

        # SentenceSplitter instance (lazy initialized)
        self.__sentence_splitter = None

    def split_paragraph(self, text: str) -> List[str]:
        """Splits text into sentences with "sentence_splitter" module.

        Language code will be read from language_code() method."""
        language_code = self.language_code()

        if self.__sentence_splitter is None:
            try:
                self.__sentence_splitter = SentenceSplitter(language=language_code)
            except Exception as ex:
                raise TextRankLanguageException(
                    "Unable to initialize sentence splitter for language '%s': %s" % (language_code, str(ex),)
                )

        if text is None:
            log.warning("Text is None.")
            return []

        # Sentence tokenizer can hang for a very long on very long text, and anything that long is more likely to be
        # an artifact than actual text
        max_text_length = get_config()['languages']['max_text_length']
        if len(text) > max_text_length:
            log.warning("Text is longer than %d characters, truncating." % max_text_length)
            text = text[:max_text_length]

        # Only "\n\n" (not a single "\n") denotes the end of sentence, so remove single line breaks
        text = re.sub('([^\n])\n([^\n])', r"\1 \2", text, flags=re.DOTALL)

        # Remove asterisks from lists
        text = re.sub(r" {2}\*", " ", text, flags=re.DOTALL)

        text = re.sub(r"\n\s\*\n", "\n\n", text, flags=re.DOTALL)
        text = re.sub(r"\n\n\n\*", "\n\n", text, flags=re.DOTALL)
        text = re.sub(r"\n\n", "\n", text, flags=re.DOTALL)

        # Replace tabs with spaces
        text = re.sub(r"\t", " ", text, flags=re.DOTALL)

        # Replace non-breaking spaces with normal spaces
        text = re.sub(r"\xa0", " ", text, flags=re.DOTALL)

        # Replace multiple spaces with a single space
        text = re.sub(" +", " ", text, flags=re.DOTALL)

        # The above regexp and HTML stripping often leave a space before the period at the end of a sentence
        text = re.sub(r" +\.", ".", text, flags=re.DOTALL)

        # Missing spaces after sentence ending periods (lower limit of characters keeps "a.C." abbreviations intact)
        text = re.sub(r"([a-z]{2,})\.([A-Z][a-z]+)", r"\1. \2", text, flags=re.DOTALL)

        # Replace Unicode's "…" with "..."
        text = text.replace("…", "...")

        text = text.strip()

        if len(text) == 0:
            log.debug("Text is empty after processing it.")
            return []

        sentences = self.__sentence_splitter.split(text=text)

        non_empty_sentences = []
        for sentence in sentences:
            sentence = sentence.strip()

            if len(sentence) > 0:
                non_empty_sentences.append(sentence)

        return non_empty_sentences


class PyStemmerMixIn(LanguageModel, metaclass=abc.ABCMeta):
    """Language which is supported by "PyStemmer" Python module."""

    def __init__(self):
        """Constructor."""
        super().__init__()

        # PyStemmer instance (lazy initialized)
        self.__pystemmer = None

    def stem_words(self, words: List[str]) -> List[str]:
        """Stem list of words with PyStemmer."""
        language_code = self.language_code()

        if language_code is None:
            raise TextRankLanguageException("Language code is None.")

        if words is None:
            raise TextRankLanguageException("Words to stem is None.")

        # Normalize apostrophe so that "auto’s" and "auto's" get treated identically (tokens to be stemmed don't
        # necessarily go through sentence tokenization first)
        words = [word.replace("’", "'") for word in words]

        # (Re-)initialize stemmer if needed
        if self.__pystemmer is None:

            try:
                self.__pystemmer = PyStemmer(language_code)
            except Exception as ex:
                raise TextRankLanguageException(
                    "Unable to initialize PyStemmer for language '%s': %s" % (language_code, str(ex),)
                )

        stems = self.__pystemmer.stemWords(words)

        if len(words) != len(stems):
            log.warning("Stem count is not the same as word count; words: %s; stems: %s" % (str(words), str(stems),))

        stems = [stem.lower() for stem in stems]

        return stems

    def stem_token(self, token: str) -> str:
        """Stem a single token with PyStemmer."""
        if not token:
            return ''

        return self.stem_words([token])[0]


class SpaCyTaggerMixIn(LanguageModel, metaclass=abc.ABCMeta):
    """Language which has a pre-trained "spaCy" pipeline with a part-of-speech tagger.

    Tags returned are Universal POS tags ("NOUN", "PROPN", "ADJ", ...)."""

    # Loaded pipelines, shared by all instances ({'model name or path': Language, ...})
    __pipelines = dict()

    # Pipeline components that don't contribute to part-of-speech tags
    __UNUSED_COMPONENTS = ['parser', 'ner', 'lemmatizer']

    __NOUN_TAGS = {'NOUN', 'PROPN'}
    __ADJECTIVE_TAGS = {'ADJ'}

    # Tag for tokens that the model didn't assign a part of speech to
    __UNKNOWN_TAG = 'X'

    @abc.abstractmethod
    def spacy_model(self) -> str:
        """Return spaCy model package name or path to the model directory."""
        raise NotImplementedError("Abstract method.")

    def spacy_pipeline(self) -> Language:
        """Return spaCy pipeline, load it on first use."""
        model = self.spacy_model()
        if not model:
            raise TextRankLanguageException("spaCy model for language '%s' is not set." % self.language_code())

        if model not in SpaCyTaggerMixIn.__pipelines:
            log.info("Loading spaCy model '%s' for language '%s'..." % (model, self.language_code(),))

            try:
                pipeline = spacy.load(model)
            except Exception as ex:
                raise TextRankLanguageException("Unable to load spaCy model '%s': %s" % (model, str(ex),))

            for component in self.__UNUSED_COMPONENTS:
                if component in pipeline.pipe_names:
                    pipeline.disable_pipe(component)

            log.info("Loaded spaCy model '%s', pipeline: %s" % (model, ', '.join(pipeline.pipe_names),))

            SpaCyTaggerMixIn.__pipelines[model] = pipeline

        return SpaCyTaggerMixIn.__pipelines[model]

    def tag_tokens(self, tokens: List[str]) -> List[str]:
        """Tag already tokenized words (the pipeline's own tokenizer is not run)."""
        if tokens is None:
            raise TextRankLanguageException("Tokens to tag is None.")

        if len(tokens) == 0:
            return []

        for token in tokens:
            if not token or not token.strip():
                raise TextRankLanguageException("Tokens to tag contain an empty token: %s" % str(tokens))

        pipeline = self.spacy_pipeline()

        doc = pipeline(Doc(pipeline.vocab, words=list(tokens)))

        tags = [token.pos_ or self.__UNKNOWN_TAG for token in doc]

        if len(tags) != len(tokens):
            raise TextRankLanguageException(
                "Tag count is not the same as token count; tokens: %s; tags: %s" % (str(tokens), str(tags),)
            )

        return tags

    def is_noun(self, pos: str) -> bool:
        return pos in self.__NOUN_TAGS

    def is_adjective(self, pos: str) -> bool:
        return pos in self.__ADJECTIVE_TAGS

    def pos_class(self, pos: str) -> str:
        """Nouns (common or proper) map to "N", adjectives to "A".

        Tokens are tagged lowercased, so the model flips between "NOUN" and "PROPN" for the same word."""
        if self.is_noun(pos):
            return 'N'
        if self.is_adjective(pos):
            return 'A'
        return pos[0]


class StopWordsFromFileMixIn(LanguageModel, metaclass=abc.ABCMeta):
    """Language for which the stop words are being stored in "<language_code>/<language_code>_stop_words.txt" file."""

    def __init__(self):
        """Constructor."""
        super().__init__()

        # Stop words map (lazy initialized)
        self.__stop_words_map = None

    def stop_words_map(self) -> Dict[str, bool]:
        """Return stop word map read from a file."""
        if self.__stop_words_map is None:

            stop_words_path = os.path.join(
                languages_path(),
                self.language_code(),
                '%s_stop_words.txt' % self.language_code(),
            )

            if not os.path.isfile(stop_words_path):
                raise TextRankLanguageException("Stop words file does not exist at path '%s'." % stop_words_path)

            stop_words = dict()
            with open(stop_words_path, 'r', encoding='utf-8') as f:
                for stop_word in f.readlines():
                    # Remove comments
                    stop_word = re.sub(r'\s*?#.*?$', '', stop_word)

                    stop_word = stop_word.strip()

                    if len(stop_word) > 0:
                        stop_words[stop_word] = True

            self.__stop_words_map = stop_words

        return self.__stop_words_map
