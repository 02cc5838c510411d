"""Adapters: concrete CSS compilers, HTML minifier and gzip writer."""
