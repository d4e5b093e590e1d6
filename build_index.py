import json
from argparse import ArgumentParser
from app import load_authority
from config import AUTHORITY_FILE, SAMPLE_PAGES_DIR, SAMPLE_WORD_COUNT
from crawler import crawl_directory
from query import SearchEngine
from utils import get_logger, write_json_file

"""
Call 'python build_index.py' from the command line to crawl the sample pages
and print assorted numbers about the resulting inverted index
"""
if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--rootdir", type=str, default=SAMPLE_PAGES_DIR)
    parser.add_argument("--authority", type=str, default=AUTHORITY_FILE)
    parser.add_argument("--report", type=str, default=None, help="write the index summary to this json file")
    args = parser.parse_args()

    logger = get_logger("BUILD_INDEX")

    engine = SearchEngine(authority=load_authority(args.authority))
    engine.build_index(crawl_directory(args.rootdir))
    info = engine.index_info(SAMPLE_WORD_COUNT)

    print(json.dumps(info, indent=4))
    if args.report:
        write_json_file(args.report, info, logger)
