# =============================================================================
# PALLET-SEO
# Liquidation landing page content pipeline: generate -> snapshot -> apply
# =============================================================================
"""
SEO content pipeline for the liquidation supplier directory.

Stages:
- generate: build prompts per page definition and call the generation API
- snapshot: write the validated batch to an immutable JSON file
- apply:    patch content fields of existing category pages by slug
"""

__version__ = "1.0.0"
