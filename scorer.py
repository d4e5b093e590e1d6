from typing import Iterable
from datastructures import Document, ScoreBreakdown

# Score weights
TITLE_MATCH_SCORE       = 15    # flat bonus, any variation in the title
DESCRIPTION_MATCH_SCORE = 10    # flat bonus, any variation in the meta description


def count_occurrences(text: str, term: str) -> int:
    """Number of non-overlapping literal occurrences of term in text"""
    if not term:
        return 0
    return text.count(term)


def score_document(document: Document, variations: Iterable[str], authority: int) -> ScoreBreakdown:
    """
    Computes the four score components of a document for one query.

    Every variation is counted on its own in the body, so a shorter variation
    found inside a longer one ("run" in "running") is counted again.

    Parameters:
        document (Document): candidate page
        variations (Iterable[str]): lowercased surface forms of the query
        authority (int): backlink weight of the page

    Returns:
        ScoreBreakdown: components and the variations found in any field
    """
    title = document.title.lower()
    description = document.description.lower()
    body = document.body.lower()

    title_score = 0
    description_score = 0
    frequency_score = 0
    matched = []

    for variation in sorted(set(variations)):
        if not variation:
            continue
        in_title = variation in title
        in_description = variation in description
        body_count = count_occurrences(body, variation)

        if in_title:
            title_score = TITLE_MATCH_SCORE
        if in_description:
            description_score = DESCRIPTION_MATCH_SCORE
        frequency_score += body_count

        if in_title or in_description or body_count:
            matched.append(variation)

    return ScoreBreakdown(title_score=title_score,
                          description_score=description_score,
                          frequency_score=frequency_score,
                          backlink_score=authority,
                          matched_variations=tuple(matched))
