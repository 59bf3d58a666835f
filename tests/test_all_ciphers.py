"""
Comprehensive tests for all cipher engines.
"""
from itertools import combinations

import pytest

from app.models.schemas import CipherFamily, CipherType
from app.services.engines.polyalphabetic.vigenere import vigenere
from app.services.engines.polygraphic.playfair import (
    ALPHABET as PLAYFAIR_ALPHABET,
    KeySquare,
    playfair,
    prepare_digraphs,
    transform_digraph,
)
from app.services.engines.registry import EngineRegistry
from app.services.engines.transposition.rail_fence import rail_fence

SAMPLE_TEXTS = [
    "",
    "A",
    "HELLO WORLD",
    "Attack at dawn!",
    "WEAREDISCOVEREDFLEEATONCE",
    "The quick brown fox jumps over the lazy dog, 42 times.",
]


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in CipherType:
            assert cipher_type in registered, f"{cipher_type} not registered"

    def test_get_engines_by_family(self):
        """Test getting engines by cipher family."""
        registry = EngineRegistry()

        for family in CipherFamily:
            assert len(registry.get_engines_by_family(family)) == 1

    def test_get_engine_by_string_id(self):
        registry = EngineRegistry()

        assert registry.get_engine("railfence").cipher_type == CipherType.RAIL_FENCE
        assert registry.get_engine("enigma") is None

    def test_all_engines_in_display_order(self):
        engines = EngineRegistry().get_all_engines()

        assert [e.cipher_type for e in engines] == list(CipherType)

    def test_engines_are_cached(self):
        registry = EngineRegistry()

        assert registry.get_engine(CipherType.CAESAR) is registry.get_engine("caesar")


class TestVigenere:
    """Test Vigenère cipher."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.VIGENERE)

    def test_known_vector(self):
        assert vigenere("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"

    def test_known_vector_decrypt(self):
        assert vigenere("LXFOPVEFRNHR", "LEMON", decrypt=True) == "ATTACKATDAWN"

    def test_key_is_case_insensitive(self):
        assert vigenere("ATTACKATDAWN", "lemon") == "LXFOPVEFRNHR"

    def test_preserves_case_and_skips_non_letters(self):
        """Spaces and punctuation do not consume key letters."""
        assert vigenere("Attack at dawn!", "LEMON") == "Lxfopv ef rnhr!"
        assert vigenere("A A", "AB") == "A B"

    @pytest.mark.parametrize("key", ["A", "LEMON", "secret", "Zz", "KEYWORDKEYWORD"])
    def test_roundtrip(self, key):
        for text in SAMPLE_TEXTS:
            assert vigenere(vigenere(text, key), key, decrypt=True) == text

    def test_empty_key_is_identity(self):
        for text in SAMPLE_TEXTS:
            assert vigenere(text, "") == text
            assert vigenere(text, "", decrypt=True) == text

    def test_engine_requires_keyword(self, engine):
        assert engine.requires_keyword is True
        assert engine.validate_key("") is False
        assert engine.validate_key("LEMON") is True

    def test_engine_roundtrip(self, engine):
        ciphertext = engine.encrypt("Meet me at noon", "lemon")
        assert engine.decrypt(ciphertext, "lemon") == "Meet me at noon"

    def test_explain(self, engine):
        explanation = engine.explain("lemon")

        assert "LEMON" in explanation
        assert "L=11" in explanation


class TestRailFence:
    """Test Rail Fence cipher."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.RAIL_FENCE)

    def test_known_vector(self):
        ciphertext = rail_fence("WEAREDISCOVEREDFLEEATONCE", 3)

        assert ciphertext == "WECRLTEERDSOEEFEAOCAIVDEN"
        assert rail_fence(ciphertext, 3, decrypt=True) == "WEAREDISCOVEREDFLEEATONCE"

    def test_default_rails_is_3(self):
        assert rail_fence("WEAREDISCOVEREDFLEEATONCE") == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_non_letters_are_positions(self):
        """Spaces and punctuation are transposed like any other character."""
        assert rail_fence("HELLO WORLD", 2) == "HLOWRDEL OL"

    @pytest.mark.parametrize("rails", range(2, 15))
    def test_roundtrip(self, rails):
        for text in SAMPLE_TEXTS:
            assert rail_fence(rail_fence(text, rails), rails, decrypt=True) == text

    @pytest.mark.parametrize("rails", [1, 0, -3])
    def test_few_rails_is_identity(self, rails):
        for text in SAMPLE_TEXTS:
            assert rail_fence(text, rails) == text
            assert rail_fence(text, rails, decrypt=True) == text

    def test_more_rails_than_characters(self):
        """The zigzag never turns, so the text comes out unchanged."""
        assert rail_fence("ABC", 10) == "ABC"
        assert rail_fence("ABC", 10, decrypt=True) == "ABC"

    def test_case_is_preserved(self):
        assert rail_fence("abcDEF", 2) == "acEbDF"

    def test_engine_parses_key(self, engine):
        assert engine.parse_key("4") == 4
        assert engine.parse_key("") == 3
        assert engine.parse_key("many") == 3

    def test_engine_roundtrip(self, engine):
        ciphertext = engine.encrypt("Rails are fun", "4")
        assert engine.decrypt(ciphertext, "4") == "Rails are fun"

    def test_explain(self, engine):
        assert "4 rails" in engine.explain("4")
        assert "unchanged" in engine.explain("1")


class TestKeySquare:
    """Test Playfair key square construction."""

    @pytest.mark.parametrize(
        "keyword",
        ["", "KEYWORD", "playfair example", "JJJ", "Hello, World!", "ZYXWVUTSRQPONMLKJIHGFEDCBA"],
    )
    def test_bijection(self, keyword):
        """Every letter of the 25-letter alphabet appears exactly once."""
        square = KeySquare.from_keyword(keyword)

        assert len(square.letters) == 25
        assert sorted(square.letters) == sorted(PLAYFAIR_ALPHABET)
        assert "J" not in square.letters

        for letter in PLAYFAIR_ALPHABET:
            row, col = square.position(letter)
            assert 0 <= row < 5 and 0 <= col < 5
            assert square.letter_at(row, col) == letter

    def test_keyword_square(self):
        square = KeySquare.from_keyword("keyword")

        assert square.rows() == [
            list("KEYWO"),
            list("RDABC"),
            list("FGHIL"),
            list("MNPQS"),
            list("TUVXZ"),
        ]

    def test_j_folds_into_i(self):
        assert KeySquare.from_keyword("JAM") == KeySquare.from_keyword("IAM")


class TestPlayfair:
    """Test Playfair cipher."""

    @pytest.fixture
    def engine(self):
        return EngineRegistry().get_engine(CipherType.PLAYFAIR)

    def test_prepare_digraphs_splits_double_letters(self):
        assert prepare_digraphs("HELLO") == [("H", "E"), ("L", "X"), ("L", "O")]
        assert prepare_digraphs("balloon") == [
            ("B", "A"), ("L", "X"), ("L", "O"), ("O", "N"),
        ]

    def test_prepare_digraphs_pads_odd_length(self):
        assert prepare_digraphs("ABC") == [("A", "B"), ("C", "X")]

    def test_prepare_digraphs_strips_non_letters(self):
        assert prepare_digraphs("a-b c!") == [("A", "B"), ("C", "X")]
        assert prepare_digraphs("123 !?") == []

    def test_prepare_digraphs_never_pairs_equal_letters(self):
        """Doubled or trailing X gets a Q filler instead of another X."""
        assert prepare_digraphs("XX") == [("X", "Q"), ("X", "Q")]
        assert prepare_digraphs("BOX") == [("B", "O"), ("X", "Q")]

        for text in SAMPLE_TEXTS + ["XXX", "AAAA", "JIJI", "FOXX", "SEE THE TREE"]:
            for a, b in prepare_digraphs(text):
                assert a != b

    def test_hello_keyword(self):
        ciphertext = playfair("HELLO", "KEYWORD")

        assert ciphertext == "GYIZSC"

    def test_decrypt_keeps_filler(self):
        """Fillers added during encryption are still present after decryption."""
        ciphertext = playfair("HELLO", "KEYWORD")

        assert playfair(ciphertext, "KEYWORD", decrypt=True) == "HELXLO"

    def test_known_vector(self):
        ciphertext = playfair("Hide the gold in the tree stump", "playfair example")

        assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"
        assert (
            playfair(ciphertext, "playfair example", decrypt=True)
            == "HIDETHEGOLDINTHETREXESTUMP"
        )

    def test_rectangle_rule_is_self_inverse(self):
        square = KeySquare.from_keyword("KEYWORD")

        for a, b in combinations(PLAYFAIR_ALPHABET, 2):
            row_a, col_a = square.position(a)
            row_b, col_b = square.position(b)
            if row_a == row_b or col_a == col_b:
                continue

            encrypted = transform_digraph(square, a, b)
            assert transform_digraph(square, *encrypted) == (a, b)
            assert transform_digraph(square, *encrypted, decrypt=True) == (a, b)

    def test_every_digraph_decrypts(self):
        square = KeySquare.from_keyword("MONARCHY")

        for a, b in combinations(PLAYFAIR_ALPHABET, 2):
            encrypted = transform_digraph(square, a, b)
            assert transform_digraph(square, *encrypted, decrypt=True) == (a, b)

    def test_same_row_and_column_wrap(self):
        square = KeySquare.from_keyword("KEYWORD")

        # Same row: K E Y W O
        assert transform_digraph(square, "W", "O") == ("O", "K")
        assert transform_digraph(square, "K", "E", decrypt=True) == ("O", "K")
        # Same column: K R F M T
        assert transform_digraph(square, "M", "T") == ("T", "K")
        assert transform_digraph(square, "K", "R", decrypt=True) == ("T", "K")

    def test_j_is_treated_as_i(self):
        assert playfair("JAM", "KEY") == playfair("IAM", "KEY")

    def test_empty_key_is_identity(self):
        for text in SAMPLE_TEXTS:
            assert playfair(text, "") == text
            assert playfair(text, "", decrypt=True) == text

    def test_roundtrip_without_fillers(self):
        """Even-length text with no doubled letters survives a round trip."""
        text = "THEQUICKBROWNFOXIUMPSOVERTHELAZYDO"
        assert playfair(playfair(text, "SECRET"), "SECRET", decrypt=True) == text

    def test_engine_requires_keyword(self, engine):
        assert engine.validate_key("") is False
        assert engine.validate_key("MONARCHY") is True

    def test_explain_shows_square(self, engine):
        explanation = engine.explain("keyword")

        assert "K E Y W O" in explanation
        assert "T U V X Z" in explanation

    def test_explain_decrypt_mentions_fillers(self, engine):
        assert "Filler" in engine.explain("keyword", decrypt=True)
