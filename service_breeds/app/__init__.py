"""
Breeds Service package for the Breed Catalog.

The service answers "which sub-breeds does this breed have?" by asking the
dog.ceo catalog, with an in-memory cache in front of the remote call.

Structure:
- app.main: FastAPI app, routes, and wiring.
- app.fetchers: The BreedFetcher contract and an in-memory implementation.
- app.adapters: HTTP client for the remote catalog.
- app.caching: Memoizing BreedFetcher decorator.
- app.models: API response models.
"""
