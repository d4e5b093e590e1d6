from collections import namedtuple

# Extracted page
#   doc_id      = stable file name of the page (e.g. "healthy-recipes.html")
#   title       = text of the <title> element
#   description = content of <meta name="description">
#   body        = visible text of <body>
Document = namedtuple("Document", ["doc_id", "title", "description", "body"])

# Per (query, document) score components
_ScoreBreakdownBase = namedtuple("ScoreBreakdown", ["title_score", "description_score",
                                                    "frequency_score", "backlink_score",
                                                    "matched_variations"])


class ScoreBreakdown(_ScoreBreakdownBase):
    __slots__ = ()

    @property
    def total_score(self) -> int:
        return self.title_score + self.description_score + self.frequency_score + self.backlink_score

    def to_dict(self) -> dict:
        return {
            "titleScore": self.title_score,
            "descriptionScore": self.description_score,
            "frequencyScore": self.frequency_score,
            "backlinkScore": self.backlink_score,
        }


_RankedResultBase = namedtuple("RankedResult", ["document", "breakdown"])


class RankedResult(_RankedResultBase):
    __slots__ = ()

    @property
    def doc_id(self) -> str:
        return self.document.doc_id

    @property
    def total_score(self) -> int:
        return self.breakdown.total_score

    def to_dict(self) -> dict:
        """Record shape served by the /search endpoint"""
        return {
            "id": self.document.doc_id,
            "filename": self.document.doc_id,
            "title": self.document.title,
            "description": self.document.description,
            "totalScore": self.breakdown.total_score,
            "breakdown": self.breakdown.to_dict(),
            "matchedVariations": list(self.breakdown.matched_variations),
        }
