import pytest

from authority import AuthorityTable
from query import SearchEngine


def make_page(title=None, description=None, body=""):
    head = ""
    if title is not None:
        head += f"<title>{title}</title>"
    if description is not None:
        head += f'<meta name="description" content="{description}">'
    return f"<html><head>{head}</head><body>{body}</body></html>"


@pytest.fixture
def recipe_corpus():
    """Two pages: A mentions "recipe" twice, B says "recipes" once."""
    return [
        ("a.html", make_page(title="Healthy Recipes",
                             body="<p>A recipe for soup.</p><p>Another recipe for bread.</p>")),
        ("b.html", make_page(title="Quick Meals", body="<p>Our favourite recipes.</p>")),
    ]


@pytest.fixture
def recipe_authority():
    return AuthorityTable({"a.html": 10, "b.html": 2})


@pytest.fixture
def recipe_engine(recipe_corpus, recipe_authority):
    engine = SearchEngine(authority=recipe_authority)
    engine.build_index(recipe_corpus)
    return engine
