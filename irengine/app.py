#!/usr/bin/env python3
"""
Flask web application exposing the retrieval models over HTTP.
"""

import time

from flask import Flask, jsonify, request

from irengine.paths import CORPUS_STATS_PATH, INDEX_PATH, RESULT_COUNT
from irengine.searcher import MODEL_NAMES, Searcher

app = Flask(__name__)

# Global searcher instance
searcher = None


def initialize_searcher(index=INDEX_PATH, stats=CORPUS_STATS_PATH):
    """Initialize the search engine. Load errors propagate to the caller."""
    global searcher
    print("Initializing search engine...")
    searcher = Searcher(index, stats)
    print("Search engine initialized successfully")
    return searcher


@app.route('/search', methods=['POST'])
def search():
    """Handle search requests: {"query": str, "model": str, "topk": int}."""
    if searcher is None:
        return jsonify({'error': 'Search engine not initialized'}), 500

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    query = str(data.get('query', '')).strip()
    model = data.get('model', 'BM25')
    topk = data.get('topk', RESULT_COUNT)

    if not query:
        return jsonify({'error': 'Empty query'}), 400

    if not isinstance(model, str) or model.lower() not in {m.lower() for m in MODEL_NAMES}:
        return jsonify({'error': f'Invalid model. Must be one of {", ".join(MODEL_NAMES)}'}), 400

    if isinstance(topk, bool) or not isinstance(topk, int) or topk < 0:
        return jsonify({'error': 'topk must be a non-negative integer'}), 400

    # Perform search with timing
    start_time = time.perf_counter()
    results = searcher.search(query, model=model, topk=topk)
    end_time = time.perf_counter()

    search_time = (end_time - start_time) * 1000  # Convert to milliseconds

    formatted_results = [{'docid': docid, 'score': score} for docid, score in results]

    return jsonify({
        'results': formatted_results,
        'searchTime': search_time,
        'totalResults': len(formatted_results),
        'query': query,
        'model': model
    })


@app.route('/health')
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'searcher_initialized': searcher is not None
    })


if __name__ == '__main__':
    # Initialize the search engine
    initialize_searcher()

    # Run the Flask app
    app.run(debug=True, host='0.0.0.0', port=5001)
