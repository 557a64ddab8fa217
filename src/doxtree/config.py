"""Local configuration for doxtree."""

from __future__ import annotations

import os


DEFAULT_EXPAND_DEPTH = 1
DEFAULT_VARIABLE_NAME = "hierarchy"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "doxtree/0.1"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "text"

# Nodes shallower than this start expanded; 1 opens the roots only.
DOXTREE_EXPAND_DEPTH = int(os.getenv("DOXTREE_EXPAND_DEPTH", str(DEFAULT_EXPAND_DEPTH)))
DOXTREE_VARIABLE_NAME = os.getenv("DOXTREE_VARIABLE_NAME", DEFAULT_VARIABLE_NAME)
DOXTREE_FETCH_TIMEOUT_S = float(os.getenv("DOXTREE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DOXTREE_FETCH_MAX_RETRIES = int(os.getenv("DOXTREE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DOXTREE_FETCH_BACKOFF_S = float(os.getenv("DOXTREE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DOXTREE_USER_AGENT = os.getenv("DOXTREE_USER_AGENT", DEFAULT_USER_AGENT)
DOXTREE_LOG_LEVEL = os.getenv("DOXTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
DOXTREE_LOG_FORMAT = os.getenv("DOXTREE_LOG_FORMAT", DEFAULT_LOG_FORMAT)
