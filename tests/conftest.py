"""Test configuration."""

import logfire

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)
