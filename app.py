import time
from argparse import ArgumentParser
from flask import Flask, jsonify, request
from authority import AuthorityTable
from config import AUTHORITY_FILE, HOST, PORT, SAMPLE_PAGES_DIR, SAMPLE_WORD_COUNT
from crawler import crawl_directory
from query import IndexNotReadyError, SearchEngine
from utils import get_logger

app_logger = get_logger("APP")


def create_app(engine: SearchEngine) -> Flask:
    app = Flask(__name__)
    app.config["SEARCH_ENGINE"] = engine

    @app.errorhandler(IndexNotReadyError)
    def index_not_ready(error):
        app_logger.warning(str(error))
        return jsonify({"error": str(error)}), 503

    @app.route('/search', methods=['GET'])
    def search():
        query = request.args.get('q', '')
        if not query:
            return jsonify({"error": 'Query parameter "q" is required'}), 400

        app_logger.info(f'Search query received: "{query}"')
        start_time = time.perf_counter() * 1000
        ranked_results = engine.search(query)
        end_time = time.perf_counter() * 1000

        app_logger.info(f"Completed search: {end_time - start_time:.0f} ms - "
                        f"{[f'{r.doc_id}: {r.total_score}' for r in ranked_results]}")
        return jsonify({"results": [result.to_dict() for result in ranked_results]})

    @app.route('/api/index-info', methods=['GET'])
    def index_info():
        return jsonify(engine.index_info(SAMPLE_WORD_COUNT))

    return app


def load_authority(file_path: str = None) -> AuthorityTable:
    if file_path:
        return AuthorityTable.from_json_file(file_path)
    return AuthorityTable.default()


if __name__ == '__main__':
    parser = ArgumentParser()
    parser.add_argument("--rootdir", type=str, default=SAMPLE_PAGES_DIR)
    parser.add_argument("--authority", type=str, default=AUTHORITY_FILE)
    parser.add_argument("--host", type=str, default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    # Crawl and index before the server accepts any query
    search_engine = SearchEngine(authority=load_authority(args.authority))
    search_engine.build_index(crawl_directory(args.rootdir))

    app_logger.info(f"Server running at http://{args.host}:{args.port}")
    create_app(search_engine).run(host=args.host, port=args.port, debug=args.debug)
