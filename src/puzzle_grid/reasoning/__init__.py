"""Recherche de plus courts chemins sur une grille."""
