"""pygame views of a composed board."""
