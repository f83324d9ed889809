"""Role domain: entities, typed failures, ports and services."""
