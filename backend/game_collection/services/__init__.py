"""Services Layer - async orchestration between the pure core and a GameStore.

Invariants:
    - Services receive the store as an argument; they never open sessions themselves
    - Query services (game_queries, collection_stats) never mutate the store
"""
