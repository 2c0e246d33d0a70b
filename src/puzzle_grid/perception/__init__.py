"""Analyse de la grille : régions, contours et visualisation."""
