"""
repository_mediatime - Depot de fichiers "Media Time" pour le selecteur de fichiers.

Ce package expose les ressources Media Time (titre, vignette, URL, dates)
au selecteur de fichiers de la plateforme hote et sert les medias references
quand un utilisateur choisit un element.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, exceptions)
- services/ : Couche application (adaptateur de depot, gestion des instances)
- adapters/ : Resolution des medias, fichiers temporaires, registre des sources
- infrastructure/ : Persistance SQLModel
- web/ : Surface HTTP FastAPI
"""
