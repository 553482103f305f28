"""
FastAPI routers.

Every collection gets its own APIRouter built by collections.build_router, so
the cars and bookings endpoints share one set of handler bodies.
"""
