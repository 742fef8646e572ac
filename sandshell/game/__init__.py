"""Shell domain: layout, panel, interaction state and the simulation bridge."""
