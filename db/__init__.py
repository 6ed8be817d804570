"""
db/ - Database Layer
====================
Handles PostgreSQL connections, the query/execute store facade and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
