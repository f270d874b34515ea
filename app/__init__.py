"""Process wiring for the pricing service: settings, errors, aiohttp app factory."""
