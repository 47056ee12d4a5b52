"""Form Echo Service: static files plus GET/POST form echo routes."""
