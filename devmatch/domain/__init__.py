"""DevMatch domain layer (entities, value objects, ports, policy)."""
