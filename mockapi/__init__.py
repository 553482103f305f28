"""Mock REST API serving the cars and bookings collections from JSON files."""
