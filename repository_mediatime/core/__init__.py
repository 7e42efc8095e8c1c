"""
Couche domaine (core).

Contient les entites metier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entites (MediaRecord, ListingEntry, InstanceOptions, ConfigForm...)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
"""
