from typing import Mapping
from utils import get_logger, read_json_file

# Simulated backlink counts (off-page signal), used when no authority file is given
DEFAULT_BACKLINK_SCORES = {
    "healthy-recipes.html": 10,
    "quick-meals.html": 2,
    "fitness-guide.html": 5,
    "about-us.html": 1,
}

authority_logger = get_logger("AUTHORITY")


class AuthorityTable:
    """
    Static {document id: weight} table. Unknown ids weigh 0.
    """
    def __init__(self, weights: Mapping[str, int] = None):
        self.weights: dict[str, int] = {}
        for doc_id, weight in (weights or {}).items():
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                authority_logger.warning(f"Ignoring invalid authority weight for {doc_id}: {weight!r}")
                continue
            self.weights[doc_id] = weight


    def __len__(self) -> int:
        return len(self.weights)


    def get_weight(self, doc_id: str) -> int:
        return self.weights.get(doc_id, 0)


    @classmethod
    def default(cls) -> "AuthorityTable":
        return cls(DEFAULT_BACKLINK_SCORES)


    @classmethod
    def from_json_file(cls, file_path: str) -> "AuthorityTable":
        """
        Loads a JSON object of {document id: non-negative integer weight}.
        An unreadable or malformed file gives an empty table.
        """
        data = read_json_file(file_path, authority_logger)
        if data is None:
            authority_logger.warning(f"No authority data loaded from {file_path}, all weights are 0")
            return cls()
        if not isinstance(data, dict):
            authority_logger.warning(f"Authority file {file_path} is not a JSON object, all weights are 0")
            return cls()
        table = cls(data)
        authority_logger.info(f"Loaded {len(table)} authority weights from {file_path}")
        return table
