"""
MovieDB - Catalogue personnel de films, d'acteurs et de genres.

Ce package fournit la couche d'accès aux données (DAOs) d'une base SQLite
et le dialogue d'ajout d'acteurs à un film.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- infrastructure/ : Persistance SQLite (SQLModel, DAOs)
- services/ : Couche application (dialogue d'acteurs, suggestions)
- adapters/ : Interface CLI
"""

__version__ = "0.1.0"
