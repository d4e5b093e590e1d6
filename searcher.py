import time
from argparse import ArgumentParser
from app import load_authority
from config import AUTHORITY_FILE, RESULT_LIMIT, SAMPLE_PAGES_DIR
from crawler import crawl_directory
from query import SearchEngine
from utils import get_logger


def print_results(results, limit: int) -> None:
    if not results:
        print("No results found.")
        return
    for rank, result in enumerate(results[:limit], start=1):
        breakdown = result.breakdown
        print(f"{rank}: {result.doc_id} - {result.document.title or 'Untitled'} - Score: {result.total_score}")
        print(f"\tTitle: +{breakdown.title_score}  Description: +{breakdown.description_score}  "
              f"Frequency: +{breakdown.frequency_score}  Backlinks: +{breakdown.backlink_score}")
        if breakdown.matched_variations:
            print(f"\tMatched terms: {', '.join(breakdown.matched_variations)}")


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--rootdir", type=str, default=SAMPLE_PAGES_DIR)
    parser.add_argument("--authority", type=str, default=AUTHORITY_FILE)
    parser.add_argument("-n", type=int, default=RESULT_LIMIT, help="number of results to print")
    args = parser.parse_args()

    logger = get_logger("SEARCHER")
    engine = SearchEngine(authority=load_authority(args.authority))
    engine.build_index(crawl_directory(args.rootdir))

    input_text = ""
    while (input_text != "quit"):
        print("Please enter the query you'd like to search (or type 'quit' to exit)")
        input_text = input()

        if (input_text != "quit"):
            print(f'Searching for "{input_text}"')

            # Begin timing after recieving search query
            start_time = time.perf_counter() * 1000

            logger.info(f'Searching "{input_text}"')
            print_results(engine.search(input_text), args.n)
            end_time = time.perf_counter() * 1000
            logger.info(f"Completed search: {end_time - start_time:.0f} ms")

    print("'quit' detected, exiting...")
    logger.info("User ended searching.")
