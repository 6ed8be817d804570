"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses command arguments,
delegates to the appropriate Service, and sends the response back to the user.
No business logic lives here.
"""
