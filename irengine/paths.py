# irengine/paths.py

import os

# --- Base data paths ---
DATA_DIR = "cacm"

# --- Source corpus and queries ---
RAW_DOC_DIR = os.path.join(DATA_DIR, "rawDocs")
QUERY_PATH = os.path.join(DATA_DIR, "cacm.query")

# --- Tokenizer output (one token file per document) ---
TOKENIZED_DOC_DIR = os.path.join(DATA_DIR, "tokenizedDocs")
TOKEN_FILE_FORMAT = "file%04d.txt"

# --- Document length table and serialized index ---
CORPUS_STATS_PATH = "Corpus-Stats.txt"
INDEX_PATH = "Unstemmed-Index.txt"

# --- Ranked run output ---
RUN_OUTPUT_DIR = "runOutput"
RESULTS_TABLE_FORMAT = "%d Q0 CACM-%04d %d %f %s\n"

# --- Retrieval defaults ---
RESULT_COUNT = 100
NGRAM_SIZE = 1
BM25_K1 = 1.2
BM25_K2 = 100.0
BM25_B = 0.75
