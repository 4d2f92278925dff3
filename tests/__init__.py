"""
Tests for the pathway_patterns package.

This directory contains unit tests for:
- The pathway model (elements, vocabularies, JSONL persistence)
- The wrapper graph and breadth-first queries
- Constraints, patterns and the backtracking searcher
- Miners, HGNC lookup, the SIF searcher and writer
- The pathway-sif command line script and settings
"""
