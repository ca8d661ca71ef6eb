"""HTTP and WebSocket adapter for game sessions."""
