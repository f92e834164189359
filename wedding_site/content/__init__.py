"""Site content helpers: config reading, metadata injection, photo listing."""
