# Traced Local Discovery API
"""
REST API for context-aware vendor cards.

Endpoints:
- GET /api/v1/vendors/cards - Filtered, score-ordered vendor cards
- GET /api/v1/vendors/filters - Localities and vendor types in the catalog
- GET /api/v1/vendors/{vendor_id} - Single vendor profile
"""
