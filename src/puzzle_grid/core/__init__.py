"""Types, configuration et grille de base."""
