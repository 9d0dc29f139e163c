"""
Scorekeeper - scoring formats and match results for youth league sports.

- Format Catalog: per-sport scoring formats, lookup with default-sport fallback (``catalog``)
- Outcome Evaluator: set completion, set winner, match and period results (``evaluation``)
- Game completion workflow and input parsing (``services``)
- Thin REST API (``api``) and command-line scorer (``run_scoring``)
"""

__version__ = "0.1.0"
