"""
Fonctions utilitaires partagees dans le package.

- params : conversion des parametres (equivalent du cast entier de l'hote)
- urls : extension et dernier segment d'une URL
"""
