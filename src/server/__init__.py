"""HTTP API for doxtree."""
