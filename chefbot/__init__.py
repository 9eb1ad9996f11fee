"""
Chefbot core package.

This package contains:
- models: Recipe and Ingredient schemas with the TheMealDB wire mapping
- connectors: recipe sources (TheMealDB over HTTP)
- fetch: result-valued fetch operations used by the UI
- storage: local key-value stores
- bookmarks: the saved-recipes store
- screen_state: per-screen loading and bookmark state machines
- formatters: display and narration text
"""

__version__ = "0.1.0"
