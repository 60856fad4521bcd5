"""
handlers/ - Presentation Layer
================================
Console menu handlers. Each handler delegates to the PlaceService,
prints the result and waits for the user to continue.
No business logic lives here.
"""
