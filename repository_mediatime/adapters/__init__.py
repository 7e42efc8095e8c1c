"""
Adaptateurs : implementations concretes des ports du domaine.

- file_system : repertoire temporaire de telechargement
- source_registry : plugins sources actives depuis la configuration
- media/ : resolution des ressources Media Time via HTTP
"""
