"""
Couche infrastructure : persistance SQLModel des donnees de l'hote.
"""
