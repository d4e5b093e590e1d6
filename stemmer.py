"""
Rule based stemmer used for both indexing and query expansion.

A closed table of irregular forms is consulted first; anything it does not
know falls through to a handful of suffix stripping rules.
"""

# Irregular surface form -> root. Roots must never be keys and must survive
# the suffix rules unchanged.
IRREGULAR_STEMS: dict[str, str] = {
    # baking
    "baking": "bake", "baked": "bake", "bakes": "bake",
    "better": "good", "best": "good",
    "worse": "bad", "worst": "bad",
    # nutrition
    "nutrition": "nutrient", "nutritional": "nutrient",
    "nutritious": "nutrient", "nutrients": "nutrient",
    "calories": "calorie",
    "proteins": "protein",
    "healthier": "healthy", "healthiest": "healthy",
    # cooking
    "recipes": "recipe",
    "meals": "meal",
    "ate": "eat", "eaten": "eat", "eating": "eat",
    "fried": "fry", "fries": "fry",
    "sliced": "slice", "slices": "slice", "slicing": "slice",
    "served": "serve", "serving": "serve", "servings": "serve",
    "made": "make", "making": "make", "makes": "make",
    "took": "take", "taken": "take", "taking": "take",
    "used": "use", "using": "use", "uses": "use",
    "leaves": "leaf", "loaves": "loaf", "knives": "knife",
    "quicker": "quick", "quickest": "quick",
    # fitness
    "ran": "run", "running": "run", "runs": "run",
    "exercises": "exercise", "exercised": "exercise", "exercising": "exercise",
    "fitter": "fit", "fittest": "fit",
    "went": "go", "gone": "go", "going": "go",
    "children": "child", "women": "woman", "men": "man",
}

DOUBLED_CONSONANTS = set("bdfgklmnprtv")


def _collapse_double(word: str) -> str:
    """running -> runn -> run"""
    if len(word) >= 2 and word[-1] == word[-2] and word[-1] in DOUBLED_CONSONANTS:
        return word[:-1]
    return word


def _strip_suffix(word: str) -> str:
    """Applies the first matching suffix rule, or returns the word unchanged."""
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("ied") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("ing") and len(word) > 4:
        return _collapse_double(word[:-3])
    if word.endswith("ed") and len(word) > 3:
        return _collapse_double(word[:-2])
    if word.endswith("s") and len(word) > 3 and not word.endswith("ss"):
        return word[:-1]
    return word


def stem(word: str) -> str:
    """
    Maps a surface word to its root.

    The irregular table always wins over suffix stripping. Suffix rules are
    repeated until the word stops changing so that the result is itself a
    root (``stem(stem(w)) == stem(w)``).

    Parameters:
        word (str): any word, case is ignored

    Returns:
        str: the lowercased root, possibly equal to the input
    """
    current = word.lower()
    while True:
        if current in IRREGULAR_STEMS:
            return IRREGULAR_STEMS[current]
        stripped = _strip_suffix(current)
        if stripped == current:
            return current
        current = stripped


def variations(word: str) -> set[str]:
    """
    Every surface form considered equivalent to ``word``: the word itself,
    its stem, and both sides of any irregular pair touching either of them.
    """
    lowered = word.lower()
    root = stem(lowered)
    found = {lowered, root}
    for surface, irregular_root in IRREGULAR_STEMS.items():
        if surface in (lowered, root) or irregular_root in (lowered, root):
            found.add(surface)
            found.add(irregular_root)
    found.discard("")
    return found
