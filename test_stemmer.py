import pytest

from stemmer import IRREGULAR_STEMS, stem, variations


class TestStem:
    @pytest.mark.parametrize("word, expected", [
        ("running", "run"),
        ("flies", "fly"),
        ("baked", "bake"),
        ("cats", "cat"),
        ("glass", "glass"),
        ("better", "good"),
        ("nutrition", "nutrient"),
        ("baking", "bake"),
    ])
    def test_examples(self, word, expected):
        assert stem(word) == expected

    @pytest.mark.parametrize("word, expected", [
        ("studies", "study"),       # ies -> y
        ("carried", "carry"),       # ied -> y
        ("jumping", "jump"),        # ing
        ("stopping", "stop"),       # ing, doubled consonant collapsed
        ("jumped", "jump"),         # ed
        ("planned", "plan"),        # ed, doubled consonant collapsed
        ("dogs", "dog"),            # s
    ])
    def test_suffix_rules(self, word, expected):
        assert stem(word) == expected

    @pytest.mark.parametrize("word", ["ties", "sing", "red", "gas", "bus", "class", "a", ""])
    def test_short_words_are_guarded(self, word):
        # every rule has a minimum length, "ties" only loses its final s
        assert stem(word) == ("tie" if word == "ties" else word)

    def test_case_insensitive(self):
        assert stem("RUNNING") == "run"
        assert stem("Baked") == "bake"
        assert stem("Cats") == "cat"

    def test_irregular_table_wins_over_suffix_rules(self):
        # suffix rules alone would give "bak" and "calory"
        assert stem("baked") == "bake"
        assert stem("calories") == "calorie"

    def test_collapse_keeps_non_listed_doubles(self):
        # "s" is not in the doubled consonant set
        assert stem("missed") == "miss"
        assert stem("kissing") == "kiss"

    @pytest.mark.parametrize("word", [
        "running", "flies", "baked", "cats", "glass", "speeds", "stressed", "bakings",
        "happiness", "studies", "mopping", "needed", "recipes", "exercises", "frying",
    ])
    def test_idempotent(self, word):
        assert stem(stem(word)) == stem(word)

    def test_irregular_roots_are_fixed_points(self):
        for root in set(IRREGULAR_STEMS.values()):
            assert root not in IRREGULAR_STEMS
            assert stem(root) == root

    def test_irregular_table_is_lowercase(self):
        for surface, root in IRREGULAR_STEMS.items():
            assert surface == surface.lower()
            assert root == root.lower()


class TestVariations:
    def test_contains_word_and_stem(self):
        assert {"jumping", "jump"} <= variations("jumping")

    def test_recipe_expands_to_plural(self):
        assert variations("recipe") == {"recipe", "recipes"}

    def test_plural_expands_to_root(self):
        assert variations("recipes") == {"recipe", "recipes"}

    def test_siblings_sharing_a_root(self):
        found = variations("baking")
        assert {"baking", "bake", "baked", "bakes"} <= found

    def test_lowercases_input(self):
        assert "recipe" in variations("RECIPE")
        assert "RECIPE" not in variations("RECIPE")

    def test_generic_stem_has_no_siblings(self):
        assert variations("jumped") == {"jumped", "jump"}

    def test_unknown_word(self):
        assert variations("quinoa") == {"quinoa"}
