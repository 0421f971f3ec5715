"""
Place search and geocoding integration.

Responsibilities:
- Manage Google Maps API configuration and credentials.
- Search for restaurants around a coordinate (Places Nearby Search).
- Resolve an address into a coordinate (Geocoding).
- Report upstream failures as typed errors (network, status, payload, not found).
"""
