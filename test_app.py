import os

import pytest

from app import create_app, load_authority
from crawler import crawl_directory
from query import SearchEngine

SAMPLE_PAGES = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sample-pages")


@pytest.fixture
def client(recipe_engine):
    return create_app(recipe_engine).test_client()


class TestSearchEndpoint:
    def test_results(self, client):
        response = client.get("/search", query_string={"q": "recipe"})
        assert response.status_code == 200
        results = response.get_json()["results"]
        assert [result["id"] for result in results] == ["a.html", "b.html"]
        assert results[0]["totalScore"] == 27
        assert results[0]["breakdown"]["titleScore"] == 15

    def test_missing_query(self, client):
        response = client.get("/search")
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_punctuation_only_query(self, client):
        response = client.get("/search", query_string={"q": "?!"})
        assert response.status_code == 200
        assert response.get_json() == {"results": []}

    def test_not_ready(self):
        client = create_app(SearchEngine()).test_client()
        response = client.get("/search", query_string={"q": "recipe"})
        assert response.status_code == 503
        assert "not ready" in response.get_json()["error"]


def test_index_info(client):
    response = client.get("/api/index-info")
    assert response.status_code == 200
    info = response.get_json()
    assert info["totalPages"] == 2
    assert info["pages"] == ["a.html", "b.html"]
    assert set(info) >= {"totalWords", "sampleWords", "indexSizeKb"}


def test_sample_pages_end_to_end():
    engine = SearchEngine(authority=load_authority())
    engine.build_index(crawl_directory(SAMPLE_PAGES))
    client = create_app(engine).test_client()

    results = client.get("/search", query_string={"q": "recipes"}).get_json()["results"]
    assert results[0]["id"] == "healthy-recipes.html"
    assert {result["id"] for result in results} >= {"healthy-recipes.html", "quick-meals.html", "about-us.html"}

    info = client.get("/api/index-info").get_json()
    assert info["totalPages"] == 4
