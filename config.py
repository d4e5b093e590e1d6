# Constants
SAMPLE_PAGES_DIR    = "sample-pages"        # corpus directory crawled at start-up
AUTHORITY_FILE      = "authority.json"      # {filename: backlink weight}
LOG_DIR             = "logs"

HOST                = "127.0.0.1"
PORT                = 3000

RESULT_LIMIT        = 10    # results printed by the command line searcher
SAMPLE_WORD_COUNT   = 20    # index keys listed by /api/index-info
