"""Server-rendered product catalog browser over a FakeStore-style REST API."""
