"""Couche adaptateurs : interfaces utilisateur au-dessus des services."""
