"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Actor, Genre)
- ports/ : Interfaces abstraites définissant les contrats des DAOs
"""
