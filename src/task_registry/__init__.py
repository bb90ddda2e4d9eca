"""In-memory task registry exposed over HTTP/JSON."""
