from unittest import TestCase

import pytest

from textrank.languages import TextRankLanguageException
from textrank.languages.nl import DutchLanguage
from textrank.util.config import set_config


class LanguageWithoutStopWords(DutchLanguage):
    """Dutch with a language code that has no stop word list."""

    @staticmethod
    def language_code() -> str:
        return "xx"


# noinspection SpellCheckingInspection
class TestDutchLanguage(TestCase):

    def setUp(self):
        self.__language = DutchLanguage()

    def test_language_code(self):
        assert self.__language.language_code() == "nl"

    def test_sample_sentence(self):
        assert len(self.__language.sample_sentence())

    def test_stop_words_map(self):
        stop_words = self.__language.stop_words_map()
        assert "geweest" in stop_words
        assert "not_a_stopword" not in stop_words

    def test_stop_words_map_missing_file(self):
        with pytest.raises(TextRankLanguageException):
            LanguageWithoutStopWords().stop_words_map()

    def test_is_stop_word(self):
        assert self.__language.is_stop_word("De") is True
        assert self.__language.is_stop_word("zonder,") is True
        assert self.__language.is_stop_word("vulkaan") is False

    def test_stem_words(self):
        input_words = ["rationele", "Organismen"]
        expected_stems = ["rationel", "organism"]
        actual_stems = self.__language.stem_words(input_words)
        assert expected_stems == actual_stems

    def test_stem_token(self):
        assert self.__language.stem_token("Organismen") == "organism"
        assert self.__language.stem_token("") == ""

    def test_split_paragraph(self):
        input_text = """
            Onder neogotiek wordt een 19e-eeuwse stroming in de architectuur verstaan die zich geheel heeft laten
            inspireren door de middeleeuwse gotiek. De neogotiek ontstond in Engeland en was een reactie op de strakke,
            koele vormen van het classicisme met haar uitgesproken rationele karakter. De neogotiek vond haar oorsprong
            in de romantiek met haar belangstelling voor de middeleeuwen.
        """
        expected_sentences = [
            (
                'Onder neogotiek wordt een 19e-eeuwse stroming in de architectuur verstaan die zich geheel heeft laten '
                'inspireren door de middeleeuwse gotiek.'
            ),
            (
                'De neogotiek ontstond in Engeland en was een reactie op de strakke, koele vormen van het classicisme '
                'met haar uitgesproken rationele karakter.'
            ),
            'De neogotiek vond haar oorsprong in de romantiek met haar belangstelling voor de middeleeuwen.',
        ]
        actual_sentences = self.__language.split_paragraph(input_text)
        assert expected_sentences == actual_sentences

    def test_split_paragraph_period_in_number(self):
        """Period in the middle of the number."""
        input_text = """
            De vulkaan, meestal gewoon Tongariro genoemd, heeft een hoogte van 1978 meter. Ruim 260.000 jaar geleden
            barstte de vulkaan voor het eerst uit. De Tongariro bestaat uit ten minste twaalf toppen.
        """
        expected_sentences = [
            'De vulkaan, meestal gewoon Tongariro genoemd, heeft een hoogte van 1978 meter.',
            'Ruim 260.000 jaar geleden barstte de vulkaan voor het eerst uit.',
            'De Tongariro bestaat uit ten minste twaalf toppen.',
        ]
        actual_sentences = self.__language.split_paragraph(input_text)
        assert expected_sentences == actual_sentences

    def test_split_paragraph_abbreviation(self):
        """Abbreviation ("m.a.w")."""
        input_text = """
            Aeroob betekent dat een organisme alleen met zuurstof kan gedijen, m.a.w dat het zuurstof gebruikt. Dit in
            tegenstelling tot anaerobe organismen, die geen zuurstof nodig hebben.
        """
        expected_sentences = [
            'Aeroob betekent dat een organisme alleen met zuurstof kan gedijen, m.a.w dat het zuurstof gebruikt.',
            'Dit in tegenstelling tot anaerobe organismen, die geen zuurstof nodig hebben.'
        ]
        actual_sentences = self.__language.split_paragraph(input_text)
        assert expected_sentences == actual_sentences

    def test_split_paragraph_truncate(self):
        set_config({'languages': {'max_text_length': 20}})
        try:
            actual_sentences = self.__language.split_paragraph('Dit is een zin. Dit is nog een zin.')
            assert actual_sentences == ['Dit is een zin.', 'Dit']
        finally:
            set_config(dict())

    def test_split_paragraph_empty(self):
        # noinspection PyTypeChecker
        assert self.__language.split_paragraph(None) == []
        assert self.__language.split_paragraph('') == []
        assert self.__language.split_paragraph(" \n\t\xa0 ") == []

    def test_tokenize_sentence(self):
        input_sentence = 'Ruim 260.000 jaar geleden barstte de vulkaan voor het eerst uit.'
        expected_tokens = [
            'ruim', '260.000', 'jaar', 'geleden', 'barstte', 'de', 'vulkaan', 'voor', 'het', 'eerst', 'uit', '.',
        ]
        actual_tokens = self.__language.tokenize_sentence(input_sentence)
        assert expected_tokens == actual_tokens

    def test_tokenize_sentence_quotes(self):
        input_sentence = 'Hij zei "ja" tegen haar.'
        expected_tokens = ['hij', 'zei', 'ja', 'tegen', 'haar', '.']
        actual_tokens = self.__language.tokenize_sentence(input_sentence)
        assert expected_tokens == actual_tokens

    def test_tokenize_sentence_apostrophe(self):
        assert self.__language.tokenize_sentence("Pa’s auto") == ["pa's", "auto"]

    def test_tokenize_sentence_elision(self):
        input_sentence = "Ik ga 's morgens naar 't werk en koop zo'n boek."
        expected_tokens = ["ik", "ga", "'s", "morgens", "naar", "'t", "werk", "en", "koop", "zo'n", "boek", "."]
        actual_tokens = self.__language.tokenize_sentence(input_sentence)
        assert expected_tokens == actual_tokens

    def test_tokenize_sentence_single_quotes(self):
        actual_tokens = self.__language.tokenize_sentence("Hij zei 'ja' tegen haar.")
        assert "ja" in actual_tokens
        assert "'ja" not in actual_tokens

    def test_tokenize_sentence_empty(self):
        # noinspection PyTypeChecker
        assert self.__language.tokenize_sentence(None) == []
        assert self.__language.tokenize_sentence('') == []

    def test_tag_tokens(self):
        tokens = self.__language.tokenize_sentence('De kat slaapt op de mat.')
        assert tokens == ['de', 'kat', 'slaapt', 'op', 'de', 'mat', '.']

        tags = self.__language.tag_tokens(tokens)
        assert len(tags) == len(tokens)
        assert tags[0] == 'DET'
        assert tags[-1] == 'PUNCT'
        assert self.__language.is_noun(tags[1])

    def test_tag_tokens_empty(self):
        assert self.__language.tag_tokens([]) == []

        with pytest.raises(TextRankLanguageException):
            self.__language.tag_tokens(['de', ''])

        with pytest.raises(TextRankLanguageException):
            # noinspection PyTypeChecker
            self.__language.tag_tokens(None)

    def test_is_noun(self):
        assert self.__language.is_noun('NOUN') is True
        assert self.__language.is_noun('PROPN') is True
        assert self.__language.is_noun('ADJ') is False
        assert self.__language.is_noun('') is False

    def test_is_adjective(self):
        assert self.__language.is_adjective('ADJ') is True
        assert self.__language.is_adjective('ADV') is False

    def test_is_relevant(self):
        assert self.__language.is_relevant('NOUN') is True
        assert self.__language.is_relevant('ADJ') is True
        assert self.__language.is_relevant('VERB') is False
        # noinspection PyTypeChecker
        assert self.__language.is_relevant(None) is False

    def test_scrub_token(self):
        assert self.__language.scrub_token('  «Huis»! ') == 'huis'
        assert self.__language.scrub_token('Auto’s') == "auto's"
        assert self.__language.scrub_token('...') == ''
        # noinspection PyTypeChecker
        assert self.__language.scrub_token(None) == ''

    def test_get_node_key(self):
        assert self.__language.get_node_key('Organismen', 'NOUN') == 'Norganism'
        assert self.__language.get_node_key('"Rationele"', 'ADJ') == 'Arationel'

        with pytest.raises(TextRankLanguageException):
            self.__language.get_node_key('organismen', '')

    def test_get_node_key_proper_noun(self):
        # Lowercased tokens get tagged either as common or as proper nouns
        assert self.__language.get_node_key('Amsterdam', 'PROPN') == self.__language.get_node_key('amsterdam', 'NOUN')
        assert self.__language.get_node_key('amsterdam', 'PROPN').startswith('N')
        assert self.__language.get_node_key('Snelle', 'ADJ') == 'A' + self.__language.stem_token('snelle')
        assert self.__language.get_node_key('loopt', 'VERB').startswith('V')

    def test_pos_class(self):
        assert self.__language.pos_class('NOUN') == 'N'
        assert self.__language.pos_class('PROPN') == 'N'
        assert self.__language.pos_class('ADJ') == 'A'
        assert self.__language.pos_class('VERB') == 'V'

    def test_spacy_pipeline_is_shared(self):
        assert DutchLanguage().spacy_pipeline() is self.__language.spacy_pipeline()

    def test_spacy_model_nonexistent(self):
        with pytest.raises(TextRankLanguageException):
            DutchLanguage(model='/nonexistent/spacy/model')
