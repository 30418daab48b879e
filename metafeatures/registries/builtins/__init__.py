"""Built-in registrations, imported lazily by the registries on first use."""
